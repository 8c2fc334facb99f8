"""News Admin Service."""
