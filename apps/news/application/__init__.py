"""News Service Application Layer."""
