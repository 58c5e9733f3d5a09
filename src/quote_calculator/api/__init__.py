"""HTTP API for the quote calculator."""
