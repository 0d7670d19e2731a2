"""HTTP API for passforms."""
