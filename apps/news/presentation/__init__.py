"""News Service Presentation Layer."""
