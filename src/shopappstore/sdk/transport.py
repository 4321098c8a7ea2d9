"""Default HTTP transport built on requests."""
from __future__ import annotations

from typing import Any, Dict, List

import requests

from shopappstore.core.errors import HttpError, TransportError
from shopappstore.core.utils.logging import get_logger
from .config import SdkConfig
from .errors import ConfigError

logger = get_logger(__name__)


class HttpTransport:
    """Sends bulk calls to ``{entrypoint}{bulk_path}`` as one JSON POST."""

    def __init__(self, config: SdkConfig, session: requests.Session | None = None) -> None:
        if not config.entrypoint:
            raise ConfigError("An API entrypoint is required")
        self.config = config
        self.session = session or requests.Session()

    @property
    def bulk_url(self) -> str:
        return self.config.entrypoint.rstrip("/") + self.config.bulk_path

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def bulk_request(self, calls: List[dict]) -> Dict[str, Any]:
        logger.debug("POST %s (%d call(s))", self.bulk_url, len(calls))
        try:
            resp = self.session.post(
                self.bulk_url,
                headers=self._headers(),
                json=calls,
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request error: {exc}") from exc

        try:
            data = resp.json()
        except ValueError:
            data = resp.text

        if not resp.ok:
            http_error = HttpError(
                f"Service returned {resp.status_code}: {resp.text[:500]}",
                status_code=resp.status_code,
                response=data,
            )
            raise TransportError(str(http_error)) from http_error

        headers: Dict[str, Any] = dict(resp.headers)
        headers["Code"] = resp.status_code
        return {"headers": headers, "data": data}
