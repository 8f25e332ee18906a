"""Data models for the Pocket retrieve call."""

import json
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Bookmark:
    id: int  # item_id, sent as a numeric string
    title: str  # resolved_title
    url: str  # resolved_url


@dataclass(frozen=True)
class RetrieveOptions:
    tag: str = "rmk"

    def to_json(self) -> bytes:
        """Compact JSON body, empty fields left out."""
        data = {k: v for k, v in asdict(self).items() if v}
        return json.dumps(data, separators=(",", ":")).encode("utf-8")
