"""Core of the shop API client (resources, bulk requests, errors)."""

from . import config, errors

__all__ = ["config", "errors"]
