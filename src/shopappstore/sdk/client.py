"""Python client for the shop platform API."""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Mapping

from shopappstore.core.bulk import BulkAggregator, Transport
from shopappstore.core.models import Resource, ResourceList
from .config import SdkConfig, load_config, merge_cli_overrides
from .transport import HttpTransport


class ShopClient:
    def __init__(
        self,
        entrypoint: str | None = None,
        token: str | None = None,
        transport: Transport | None = None,
        config: SdkConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        base_config = config or load_config()
        self.config = merge_cli_overrides(base_config, entrypoint=entrypoint, token=token)
        self.transport = transport or HttpTransport(self.config)
        self.bulk = BulkAggregator(self.transport, logger=logger)

    # --- public methods ---
    def get_many(self, resources: Mapping[Hashable, Resource]) -> Dict[Hashable, ResourceList]:
        return self.bulk.get(resources)

    def get(self, resource: Resource) -> ResourceList:
        return self.bulk.get({resource.name: resource})[resource.name]
