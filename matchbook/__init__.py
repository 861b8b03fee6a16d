"""Limit order books with price and price-time matching, a multi-symbol exchange, a thread-safe order queue and demonstration commands."""

__version__ = "0.1.0"