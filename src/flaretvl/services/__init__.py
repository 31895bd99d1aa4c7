"""External service clients and the fetch-and-build pipeline."""
