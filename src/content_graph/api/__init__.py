"""HTTP API for the content graph."""
