"""HTTP API for Brandmark."""
