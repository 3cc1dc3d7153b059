"""Code shared across API projects."""
