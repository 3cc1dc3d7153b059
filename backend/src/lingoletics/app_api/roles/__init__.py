"""Role and permission API."""
