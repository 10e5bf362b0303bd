"""Small helpers shared across Herald packages."""
