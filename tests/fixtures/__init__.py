"""Test data shared across the fuzzbunny test suite."""
