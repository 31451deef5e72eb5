from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class OperationKind(str, Enum):
    QUOTE = "quote"
    NEWS_SENTIMENT = "news"
    INTRADAY = "intraday"
    SYMBOL_SEARCH = "search"
    POPULAR_SYMBOLS = "popular"


@dataclass(frozen=True)
class OperationRequest:
    kind: OperationKind
    symbol: Optional[str] = None
    keywords: Optional[str] = None
    interval: Optional[str] = None


@dataclass(frozen=True)
class UpstreamQuery:
    function_code: str
    api_key: str
    parameters: Dict[str, str] = field(default_factory=dict)

    def as_params(self) -> Dict[str, str]:
        """Query-string parameters in the provider's wire form."""
        params = {"function": self.function_code}
        params.update(self.parameters)
        params["apikey"] = self.api_key
        return params


# Upstream SYMBOL_SEARCH records use positional "N. field" keys.
_MATCH_FIELDS = (
    ("1. symbol", "symbol"),
    ("2. name", "name"),
    ("3. type", "type"),
    ("4. region", "region"),
    ("5. marketOpen", "marketOpen"),
    ("6. marketClose", "marketClose"),
    ("7. timezone", "timezone"),
    ("8. currency", "currency"),
    ("9. matchScore", "matchScore"),
)


@dataclass
class SymbolMatch:
    symbol: Optional[str]
    name: Optional[str]
    type: Optional[str]
    region: Optional[str]
    marketOpen: Optional[str]
    marketClose: Optional[str]
    timezone: Optional[str]
    currency: Optional[str]
    matchScore: Optional[str]

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "SymbolMatch":
        return cls(**{name: raw.get(key) for key, name in _MATCH_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for _, name in _MATCH_FIELDS}


def parse_matches(body: Any) -> List[SymbolMatch]:
    """Reshape a SYMBOL_SEARCH body into SymbolMatch records."""
    if not isinstance(body, dict):
        raise ValueError(f"Unexpected search response type: {type(body).__name__}")
    raw_matches = body.get("bestMatches") or []
    return [SymbolMatch.from_raw(item) for item in raw_matches]


class ErrorEnvelope(BaseModel):
    error: str
    message: Optional[str] = None
    validIntervals: Optional[List[str]] = None
    availableRoutes: Optional[List[str]] = None

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class HealthStatus(BaseModel):
    status: str = "OK"
    message: str
    timestamp: str
