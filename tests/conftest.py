"""Pytest configuration for packbits-rle tests."""

from typing import Any


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as walking inputs of the full 16-bit length range",
    )
