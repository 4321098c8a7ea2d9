"""Bulk requests: many resource queries in one round trip."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Mapping, NoReturn, Optional, Protocol

from . import config
from .errors import ErrorKind, ResourceError, TransportError
from .models.resource_list import ResourceList
from .models.resources import Resource
from .utils.logging import get_logger


class Transport(Protocol):
    def bulk_request(self, calls: List[dict]) -> Mapping[str, Any]:
        ...


@dataclass
class BulkCall:
    id: Hashable
    name: str
    params: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_resource(cls, key: Hashable, resource: Resource) -> "BulkCall":
        return cls(id=key, name=resource.name, params=dict(resource.criteria) or None)

    def to_payload(self) -> dict:
        payload: dict = {"id": self.id, "name": self.name}
        if self.params:
            payload["params"] = dict(self.params)
        return payload


class BulkAggregator:
    """Runs several resource queries as a single bulk request.

    The transport answers with one response holding a sub-response per call;
    these are fanned back out into one ResourceList per key. Any failing
    sub-response fails the whole batch.

    ``logger`` overrides the library logger. With an override in place the
    fallback error entry for unmapped HTTP failures is left to its owner.
    """

    def __init__(self, transport: Transport, logger: logging.Logger | None = None) -> None:
        self.transport = transport
        self.logger_override = logger
        self.logger = logger or get_logger(__name__)

    def get(self, resources: Mapping[Hashable, Resource]) -> Dict[Hashable, ResourceList]:
        calls = [BulkCall.from_resource(key, resource) for key, resource in resources.items()]
        self.logger.debug("Sending bulk request with %d call(s)", len(calls))
        try:
            response = self.transport.bulk_request([call.to_payload() for call in calls])
        except TransportError as exc:
            self._dispatch_error(exc)
        return self._transform_response(response)

    # --- internal helpers ---
    def _transform_response(self, response: Any) -> Dict[Hashable, ResourceList]:
        if not isinstance(response, Mapping):
            raise ResourceError(ErrorKind.RESOURCE, body=response)

        headers = response.get("headers") or {}
        code = headers.get("Code") if isinstance(headers, Mapping) else None
        data = response.get("data")
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ResourceError(ErrorKind.RESOURCE, body=response, status_code=code)
        items = data.get("items") or []
        if not isinstance(items, list) or not all(_is_well_formed(item) for item in items):
            raise ResourceError(ErrorKind.RESOURCE, body=response, status_code=code)

        failed = not config.is_success(code) or any(not config.is_success(item.get("code")) for item in items)
        if failed:
            payload = data["error"] if data.get("error") is not None else response
            raise ResourceError(ErrorKind.RESOURCE, body=payload, status_code=code)

        results: Dict[Hashable, ResourceList] = {}
        for item in items:
            results[item["id"]] = ResourceList.from_body(item.get("body"))
        return results

    def _dispatch_error(self, exc: TransportError) -> NoReturn:
        http_error = exc.http_error
        if http_error is None:
            raise exc

        error = ResourceError.from_http_error(http_error)
        if error.kind is ErrorKind.COMMUNICATION and self.logger_override is None:
            self.logger.error("%s", http_error)
        raise error from http_error


def _is_well_formed(item: Any) -> bool:
    if not isinstance(item, Mapping) or "id" not in item:
        return False
    body = item.get("body")
    return body is None or isinstance(body, Mapping)
