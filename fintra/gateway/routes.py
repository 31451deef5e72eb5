from __future__ import annotations
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fintra.config.settings import get_settings
from .operations import execute
from .schema import OperationKind
from .upstream import AlphaVantageClient


def _resolve_client(request: Request) -> AlphaVantageClient:
    """Shared upstream client from app.state; created lazily if startup didn't run."""
    client = getattr(request.app.state, "upstream_client", None)
    if client is None:
        settings = get_settings()
        client = AlphaVantageClient(settings.ALPHAVANTAGE_BASE_URL, timeout=settings.UPSTREAM_TIMEOUT_SECONDS)
        request.app.state.upstream_client = client
    return client


async def _run(request: Request, kind: OperationKind, **raw: Any) -> JSONResponse:
    client = None
    if kind is not OperationKind.POPULAR_SYMBOLS:
        client = _resolve_client(request)
    status_code, body = await execute(kind, raw, client, get_settings().ALPHAVANTAGE_API_KEY or "")
    return JSONResponse(status_code=status_code, content=body)


def register(app: FastAPI) -> None:
    # The symbol-less variants exist so an empty symbol is a 400, not a 404.
    @app.get("/company-quote/{symbol}")
    @app.get("/company-quote", include_in_schema=False)
    @app.get("/company-quote/", include_in_schema=False)
    async def company_quote(request: Request, symbol: Optional[str] = None) -> Any:
        return await _run(request, OperationKind.QUOTE, symbol=symbol)

    @app.get("/company-news/{symbol}")
    @app.get("/company-news", include_in_schema=False)
    @app.get("/company-news/", include_in_schema=False)
    async def company_news(request: Request, symbol: Optional[str] = None) -> Any:
        return await _run(request, OperationKind.NEWS_SENTIMENT, symbol=symbol)

    @app.get("/company-intraday/{symbol}")
    @app.get("/company-intraday", include_in_schema=False)
    @app.get("/company-intraday/", include_in_schema=False)
    async def company_intraday(request: Request, symbol: Optional[str] = None, interval: Optional[str] = None) -> Any:
        return await _run(request, OperationKind.INTRADAY, symbol=symbol, interval=interval)

    @app.get("/company-search")
    async def company_search(request: Request, keywords: Optional[str] = None) -> Any:
        return await _run(request, OperationKind.SYMBOL_SEARCH, keywords=keywords)

    @app.get("/company-symbols/popular")
    async def company_symbols_popular(request: Request) -> Any:
        return await _run(request, OperationKind.POPULAR_SYMBOLS)
