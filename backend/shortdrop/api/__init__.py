"""HTTP API: the /api namespace and the public short link routes."""
