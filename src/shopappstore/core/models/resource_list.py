"""Paginated result sets."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional


@dataclass
class ResourceList:
    items: List[Any] = field(default_factory=list)
    page: Optional[int] = None
    count: Optional[int] = None
    page_count: Optional[int] = None

    @classmethod
    def from_body(cls, body: Mapping[str, Any] | None) -> "ResourceList":
        """Build a list from a response body (``list``, ``page``, ``count``, ``pages``)."""
        body = body or {}
        items = body.get("list")
        return cls(
            items=list(items) if items is not None else [],
            page=body.get("page"),
            count=body.get("count"),
            page_count=body.get("pages"),
        )

    def to_dict(self) -> dict:
        return {
            "items": self.items,
            "page": self.page,
            "count": self.count,
            "pages": self.page_count,
        }

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]
