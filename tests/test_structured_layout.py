import pytest
from collections import Counter

from layoutgen import EdgeProducer, InvalidParameter, StructuredLayout


class TestStructuredLayout:
    def test_five_nodes_fan_out_two(self):
        edges = StructuredLayout.new_from_num_nodes(5, 2).build_edges()

        assert edges == [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3), (2, 4), (3, 4)]

        out_degree = Counter(p for p, _ in edges)
        assert {s for p, s in edges if p == 0} == {1, 2}
        assert out_degree[3] == 1
        assert out_degree[4] == 0

    def test_edges_point_forward(self, structured_params):
        for node_count, edges_per_node in structured_params:
            layout = StructuredLayout.new_from_num_nodes(node_count, edges_per_node)
            for p, s in layout.build_edges():
                assert 0 <= p < s < node_count

    def test_no_duplicate_edges(self, structured_params):
        for node_count, edges_per_node in structured_params:
            edges = StructuredLayout.new_from_num_nodes(node_count, edges_per_node).build_edges()
            assert len(edges) == len(set(edges))

    def test_deterministic(self):
        layout = StructuredLayout.new_from_num_nodes(50, 4)
        assert layout.build_edges() == layout.build_edges()
        assert StructuredLayout.new_from_num_nodes(50, 4).build_edges() == layout.build_edges()

    def test_fan_out_capped_at_tail(self):
        node_count, edges_per_node = 10, 3
        edges = StructuredLayout.new_from_num_nodes(node_count, edges_per_node).build_edges()
        out_degree = Counter(p for p, _ in edges)
        for i in range(node_count):
            assert out_degree[i] == min(edges_per_node, node_count - 1 - i)

    def test_single_node_has_no_edges(self):
        assert StructuredLayout.new_from_num_nodes(1, 3).build_edges() == []

    def test_zero_fan_out(self):
        assert StructuredLayout.new_from_num_nodes(8, 0).build_edges() == []

    def test_large_fan_out_gives_complete_dag(self):
        edges = StructuredLayout.new_from_num_nodes(6, 100).build_edges()
        assert len(edges) == 6 * 5 // 2

    def test_invalid_node_count(self):
        with pytest.raises(InvalidParameter):
            StructuredLayout.new_from_num_nodes(0, 2)
        with pytest.raises(InvalidParameter):
            StructuredLayout.new_from_num_nodes(-3, 2)

    def test_invalid_edges_per_node(self):
        with pytest.raises(InvalidParameter) as exc_info:
            StructuredLayout.new_from_num_nodes(5, -1)
        assert exc_info.value.name == "edges_per_node"

    def test_non_integer_parameters(self):
        with pytest.raises(InvalidParameter):
            StructuredLayout.new_from_num_nodes(5.0, 2)
        with pytest.raises(InvalidParameter):
            StructuredLayout.new_from_num_nodes(True, 2)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            StructuredLayout.new_from_num_nodes(0, 0)

    def test_is_edge_producer(self):
        assert isinstance(StructuredLayout.new_from_num_nodes(3, 1), EdgeProducer)

    def test_immutable(self):
        layout = StructuredLayout.new_from_num_nodes(3, 1)
        with pytest.raises(AttributeError):
            layout.node_count = 10

    @pytest.mark.slow
    def test_large_layout_edge_count(self):
        node_count, edges_per_node = 20000, 5
        edges = StructuredLayout.new_from_num_nodes(node_count, edges_per_node).build_edges()
        expected = sum(min(edges_per_node, node_count - 1 - i) for i in range(node_count))
        assert len(edges) == expected
