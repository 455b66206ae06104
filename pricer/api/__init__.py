"""HTTP API for the pricer."""
