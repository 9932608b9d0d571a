"""HTTP API for the search transformer."""
