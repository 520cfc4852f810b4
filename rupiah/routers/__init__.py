"""API routers package (currency codec endpoints, health and metrics)."""
