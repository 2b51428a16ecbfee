"""HTTP API for orders."""
