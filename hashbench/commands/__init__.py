"""CLI command implementations for hashbench."""
