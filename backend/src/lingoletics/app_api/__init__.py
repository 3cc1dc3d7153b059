"""Application API for the Lingoletics platform."""
