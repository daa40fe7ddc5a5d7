"""Testing helpers for code that depends on credhash."""
