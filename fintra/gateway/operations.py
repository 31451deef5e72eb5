"""
Operation dispatch for the market-data gateway.

Every operation runs through the same pipeline:

  1. build_request()        raw params -> validated OperationRequest
  2. build_upstream_query() OperationRequest -> UpstreamQuery (function code,
                            mapped params, api key)
  3. client.fetch()         one outbound call
  4. spec.shape()           upstream body -> Response Envelope

Validation failures stop at step 1 with no outbound call. Anything raised in
steps 3-4 becomes the operation's "Failed to fetch <label> data" envelope.
PopularSymbols has no function code and is served from the static catalog.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from fintra.config import catalog
from fintra.utils.exceptions import (
    GatewayError,
    InvalidParameterError,
    MissingParameterError,
    UpstreamError,
)
from fintra.utils.helpers import normalize_symbol
from .schema import ErrorEnvelope, OperationKind, OperationRequest, UpstreamQuery, parse_matches

logger = logging.getLogger(__name__)

SYMBOL_REQUIRED = "Symbol parameter is required"
KEYWORDS_REQUIRED = "Keywords parameter is required. Example: /company-search?keywords=microsoft"


def _symbol_params(req: OperationRequest) -> Dict[str, str]:
    return {"symbol": req.symbol}


def _ticker_params(req: OperationRequest) -> Dict[str, str]:
    return {"tickers": req.symbol}


def _intraday_params(req: OperationRequest) -> Dict[str, str]:
    return {"symbol": req.symbol, "interval": req.interval}


def _keyword_params(req: OperationRequest) -> Dict[str, str]:
    return {"keywords": req.keywords}


def _shape_passthrough(req: OperationRequest, body: Any) -> Dict[str, Any]:
    envelope = {"success": True, "data": body, "symbol": req.symbol}
    if req.interval is not None:
        envelope["interval"] = req.interval
    return envelope


def _shape_search(req: OperationRequest, body: Any) -> Dict[str, Any]:
    matches = [m.to_dict() for m in parse_matches(body)]
    return {"success": True, "data": matches, "total": len(matches), "keywords": req.keywords}


def _shape_popular(req: OperationRequest, body: Any) -> Dict[str, Any]:
    symbols = catalog.popular_symbols()
    return {
        "success": True,
        "data": symbols,
        "total": len(symbols),
        "message": catalog.POPULAR_SYMBOLS_MESSAGE,
    }


@dataclass(frozen=True)
class OperationSpec:
    kind: OperationKind
    label: str
    function_code: Optional[str]
    params: Optional[Callable[[OperationRequest], Dict[str, str]]]
    shape: Callable[[OperationRequest, Any], Dict[str, Any]]

    @property
    def failure_message(self) -> str:
        return f"Failed to fetch {self.label} data"


OPERATIONS: Dict[OperationKind, OperationSpec] = {
    spec.kind: spec
    for spec in (
        OperationSpec(OperationKind.QUOTE, "company quote", "GLOBAL_QUOTE", _symbol_params, _shape_passthrough),
        OperationSpec(OperationKind.NEWS_SENTIMENT, "company news", "NEWS_SENTIMENT", _ticker_params, _shape_passthrough),
        OperationSpec(OperationKind.INTRADAY, "company intraday", "TIME_SERIES_INTRADAY", _intraday_params, _shape_passthrough),
        OperationSpec(OperationKind.SYMBOL_SEARCH, "company search", "SYMBOL_SEARCH", _keyword_params, _shape_search),
        OperationSpec(OperationKind.POPULAR_SYMBOLS, "popular symbols", None, None, _shape_popular),
    )
}

_SYMBOL_OPERATIONS = (OperationKind.QUOTE, OperationKind.NEWS_SENTIMENT, OperationKind.INTRADAY)


def build_request(kind: OperationKind, raw_params: Optional[Mapping[str, Any]] = None) -> OperationRequest:
    """Validate raw params for `kind`. Raises MissingParameterError / InvalidParameterError."""
    raw = dict(raw_params or {})
    kind = OperationKind(kind)

    if kind in _SYMBOL_OPERATIONS:
        symbol = normalize_symbol(raw.get("symbol"))
        if not symbol:
            raise MissingParameterError("symbol", SYMBOL_REQUIRED)
        interval = None
        if kind is OperationKind.INTRADAY:
            interval = raw.get("interval")
            if interval is None:
                interval = catalog.DEFAULT_INTERVAL
            if interval not in catalog.VALID_INTERVALS:
                raise InvalidParameterError(
                    "interval",
                    "Invalid interval. Valid intervals: " + ", ".join(catalog.VALID_INTERVALS),
                    catalog.VALID_INTERVALS,
                )
        return OperationRequest(kind=kind, symbol=symbol, interval=interval)

    if kind is OperationKind.SYMBOL_SEARCH:
        keywords = raw.get("keywords")
        if not keywords:
            raise MissingParameterError("keywords", KEYWORDS_REQUIRED)
        # keywords go upstream verbatim: no strip, no case change
        return OperationRequest(kind=kind, keywords=str(keywords))

    return OperationRequest(kind=kind)


def build_upstream_query(req: OperationRequest, api_key: str) -> Optional[UpstreamQuery]:
    """Map a validated request to its upstream query; None when no call is needed."""
    spec = OPERATIONS[req.kind]
    if spec.function_code is None:
        return None
    return UpstreamQuery(function_code=spec.function_code, api_key=api_key, parameters=spec.params(req))


def error_body(exc: GatewayError) -> Dict[str, Any]:
    if isinstance(exc, InvalidParameterError):
        return ErrorEnvelope(error=str(exc), validIntervals=exc.valid_values).to_body()
    return ErrorEnvelope(error=str(exc)).to_body()


async def execute(
    kind: OperationKind,
    raw_params: Optional[Mapping[str, Any]],
    client,
    api_key: str,
) -> Tuple[int, Dict[str, Any]]:
    """
    Run one operation end to end and return (status_code, body).

    `client` only needs an async `fetch(UpstreamQuery)`; it is not touched for
    invalid input or for operations without an upstream call.
    """
    try:
        req = build_request(kind, raw_params)
    except (MissingParameterError, InvalidParameterError) as e:
        logger.info("Rejected %s request: %s", OperationKind(kind).value, e)
        return e.status_code, error_body(e)

    spec = OPERATIONS[req.kind]
    try:
        query = build_upstream_query(req, api_key)
        body = None
        if query is not None:
            body = await client.fetch(query)
        return 200, spec.shape(req, body)
    except UpstreamError as e:
        logger.error("Error fetching %s: %s", spec.label, e)
        return 500, ErrorEnvelope(error=spec.failure_message, message=str(e)).to_body()
    except Exception as e:
        logger.exception("Error fetching %s", spec.label)
        return 500, ErrorEnvelope(error=spec.failure_message, message=str(e)).to_body()
