"""Invitation authorization API."""
