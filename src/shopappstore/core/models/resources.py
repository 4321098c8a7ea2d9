"""Resource descriptors and the built-in catalog."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Resource:
    name: str
    external_id_name: str = ""
    criteria: Mapping[str, Any] = field(default_factory=dict, hash=False)
    object_name: Optional[str] = None

    def __post_init__(self) -> None:
        # read-only copy of the caller's criteria
        object.__setattr__(self, "criteria", MappingProxyType(dict(self.criteria)))

    def with_criteria(self, **params: Any) -> "Resource":
        merged = dict(self.criteria)
        merged.update(params)
        return replace(self, criteria=merged)

    # query helpers, named after the platform's query parameters
    def filters(self, filters: Mapping[str, Any]) -> "Resource":
        return self.with_criteria(filters=json.dumps(dict(filters)))

    def page(self, page: int) -> "Resource":
        return self.with_criteria(page=page)

    def limit(self, limit: int) -> "Resource":
        return self.with_criteria(limit=limit)

    def order(self, order: str) -> "Resource":
        return self.with_criteria(order=order)


SUBSCRIBERS = Resource(name="subscribers", external_id_name="subscriber_id", object_name="subscriber")
WEBHOOKS = Resource(name="webhooks", external_id_name="webhook_id", object_name="webhook")


class WebhookFormat(IntEnum):
    JSON = 0
    XML = 1


class WebhookEvent(str, Enum):
    ORDER_CREATE = "order.create"
    ORDER_EDIT = "order.edit"
    ORDER_PAID = "order.paid"
    ORDER_STATUS = "order.status"
    ORDER_DELETE = "order.delete"
    CLIENT_CREATE = "client.create"
    CLIENT_EDIT = "client.edit"
    CLIENT_DELETE = "client.delete"
    PRODUCT_CREATE = "product.create"
    PRODUCT_EDIT = "product.edit"
    PRODUCT_DELETE = "product.delete"
    PARCEL_CREATE = "parcel.create"
    PARCEL_DISPATCH = "parcel.dispatch"
    PARCEL_DELETE = "parcel.delete"
