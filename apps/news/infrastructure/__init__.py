"""News Service Infrastructure Layer."""
