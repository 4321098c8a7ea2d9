"""Client library for the shop platform REST API."""

from .core.bulk import BulkAggregator
from .core.errors import ErrorKind, HttpError, ResourceError, ShopAppstoreError, TransportError
from .core.models import Resource, ResourceList

__all__ = [
    "BulkAggregator",
    "ErrorKind",
    "HttpError",
    "Resource",
    "ResourceError",
    "ResourceList",
    "ShopAppstoreError",
    "TransportError",
]
