"""Application Services."""

from news.application.services.params import parse_identifier, parse_topic_filter

__all__ = ["parse_identifier", "parse_topic_filter"]
