"""HTTP client for the official sanctions list search service, used for comparisons."""

from __future__ import annotations

import json
import os
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Optional

ENDPOINT_ENV = "OFAC_SEARCH_ENDPOINT"

_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.6",
    "Content-Type": "application/json",
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    ),
}


class OFACSearchError(Exception):
    """A search request failed; ``error_message`` holds the service's message, if any."""

    def __init__(self, message: str, error_message: str = "") -> None:
        super().__init__(message)
        self.error_message = error_message


@dataclass
class SearchParams:
    """Parameters of a search request."""

    name: str = ""
    city: str = ""
    id_number: str = ""
    state_province: str = ""
    name_score: int = 0
    country: str = ""
    programs: Optional[list[str]] = field(default_factory=list)
    entity_type: str = ""
    address: str = ""
    list_name: str = ""

    def to_json(self) -> dict[str, Any]:
        """The request body; programs is always an array."""
        return {
            "name": self.name,
            "city": self.city,
            "idNumber": self.id_number,
            "stateProvince": self.state_province,
            "nameScore": self.name_score,
            "country": self.country,
            "programs": list(self.programs or []),
            "type": self.entity_type,
            "address": self.address,
            "list": self.list_name,
        }


def _lookup(data: dict[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if k.lower() == lowered:
            return v
    return None


def _as_int(value: Any, key: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != int(value):
        raise ValueError(f"field {key!r} is not an integer: {value!r}")
    return int(value)


def _as_str(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} is not a string: {value!r}")
    return value


@dataclass(frozen=True)
class SearchResult:
    """One match returned by the search service."""

    id: int = 0
    name: str = ""
    address: str = ""
    entity_type: str = ""
    programs: str = ""
    lists: str = ""
    name_score: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "SearchResult":
        """Build a result from a decoded JSON object; raises ValueError on bad shapes."""
        if not isinstance(data, dict):
            raise ValueError(f"search result is not an object: {data!r}")
        return cls(
            id=_as_int(_lookup(data, "id"), "id"),
            name=_as_str(_lookup(data, "name"), "name"),
            address=_as_str(_lookup(data, "address"), "address"),
            entity_type=_as_str(_lookup(data, "type"), "type"),
            programs=_as_str(_lookup(data, "programs"), "programs"),
            lists=_as_str(_lookup(data, "lists"), "lists"),
            name_score=_as_int(_lookup(data, "nameScore"), "nameScore"),
        )


def _parse_results(raw: bytes) -> list[SearchResult]:
    data = json.loads(raw)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("search response is not an array")
    return [SearchResult.from_json(item) for item in data]


def _error_message(raw: bytes) -> str:
    try:
        data = json.loads(raw)
    except ValueError:
        return ""
    if not isinstance(data, dict):
        return ""
    message = _lookup(data, "errorMessage")
    return message if isinstance(message, str) else ""


class Client:
    """Makes search calls to the sanctions list search service.

    The service URL comes from the ``OFAC_SEARCH_ENDPOINT`` environment variable
    and may be changed through the ``endpoint`` attribute.
    """

    def __init__(self, timeout: float = 20.0) -> None:
        self.timeout = timeout
        self.endpoint = os.environ.get(ENDPOINT_ENV, "")

    def search(self, params: SearchParams) -> list[SearchResult]:
        """Run a search; raises OFACSearchError on transport or response problems."""
        if not self.endpoint:
            raise OFACSearchError("creating search request: no search endpoint configured")

        body = json.dumps(params.to_json()).encode("utf-8")
        try:
            request = urllib.request.Request(
                self.endpoint, data=body, method="POST", headers=dict(_HEADERS)
            )
        except ValueError as exc:
            raise OFACSearchError(f"creating search request: {exc}") from exc

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                raw = response.read()
        except urllib.error.HTTPError as exc:
            raw = exc.read()
        except OSError as exc:
            raise OFACSearchError(f"making search request: {exc}") from exc

        try:
            return _parse_results(raw)
        except ValueError as exc:
            message = _error_message(raw)
            text = raw.decode("utf-8", errors="replace")
            raise OFACSearchError(
                f"reading search response: {text}: {message or exc}", error_message=message
            ) from exc