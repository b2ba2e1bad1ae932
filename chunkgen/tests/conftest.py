"""Pytest configuration for chunkgen tests."""

import os

# Run against default tuning regardless of the developer's environment
for _name in list(os.environ):
    if _name.startswith("CHUNKGEN_"):
        del os.environ[_name]
