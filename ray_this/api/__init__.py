"""HTTP API for building ray.so snippet URLs."""
