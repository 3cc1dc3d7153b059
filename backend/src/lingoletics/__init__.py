"""Lingoletics backend."""
