"""
Verify project setup is correct.
"""

import washer


def test_version_exists():
    """Package has version."""
    assert hasattr(washer, "__version__")
    assert washer.__version__ == "0.1.0"


def test_public_api_exported():
    """Top-level package re-exports the cycle API."""
    for name in ("WashingMachine", "LaundryBatch", "ProgramConfiguration", "LaundryStatus"):
        assert name in washer.__all__
        assert hasattr(washer, name)
