"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the layoutgen test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "structured"    # Run only structured layout tests
    pytest tests/ --quick            # Skip slow property sweeps
"""

import random
from pathlib import Path
from typing import List, Tuple

import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Independent seeded generator"""
    return random.Random(1234)


@pytest.fixture
def structured_params() -> List[Tuple[int, int]]:
    """(node_count, edges_per_node) combinations covering tail and edge cases"""
    return [
        (1, 0), (1, 5), (2, 1), (5, 0), (5, 2), (5, 4), (5, 10),
        (17, 3), (64, 1), (100, 7),
    ]
