"""Core models."""

from .resource_list import ResourceList
from .resources import SUBSCRIBERS, WEBHOOKS, Resource, WebhookEvent, WebhookFormat

__all__ = [
    "Resource",
    "ResourceList",
    "SUBSCRIBERS",
    "WEBHOOKS",
    "WebhookEvent",
    "WebhookFormat",
]
