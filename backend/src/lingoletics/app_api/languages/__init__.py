"""Content language API."""
