"""Text normalization before and after pattern matching."""
