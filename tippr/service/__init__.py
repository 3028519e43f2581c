"""Pure calculation services."""
