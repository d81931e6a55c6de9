"""Gist-backed portfolio content store with an authenticated admin layer."""

__version__ = "1.0.0"
