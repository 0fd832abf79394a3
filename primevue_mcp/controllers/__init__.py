"""Transport controllers (HTTP)."""
