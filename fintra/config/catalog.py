"""
Static data served by the API: the popular-symbols list and the route
documentation. Pure data, no logic.
"""

VALID_INTERVALS = ("1min", "5min", "15min", "30min", "60min")
DEFAULT_INTERVAL = "5min"

POPULAR_SYMBOLS_MESSAGE = "Popular US stock symbols"


def _us_equity(symbol: str, name: str) -> dict:
    return {"symbol": symbol, "name": name, "type": "Equity", "region": "United States"}


POPULAR_SYMBOLS = (
    _us_equity("AAPL", "Apple Inc."),
    _us_equity("MSFT", "Microsoft Corporation"),
    _us_equity("GOOGL", "Alphabet Inc."),
    _us_equity("AMZN", "Amazon.com Inc."),
    _us_equity("TSLA", "Tesla Inc."),
    _us_equity("META", "Meta Platforms Inc."),
    _us_equity("NVDA", "NVIDIA Corporation"),
    _us_equity("JPM", "JPMorgan Chase & Co."),
    _us_equity("JNJ", "Johnson & Johnson"),
    _us_equity("V", "Visa Inc."),
    _us_equity("PG", "Procter & Gamble Company"),
    _us_equity("UNH", "UnitedHealth Group Incorporated"),
    _us_equity("HD", "Home Depot Inc."),
    _us_equity("MA", "Mastercard Incorporated"),
    _us_equity("BAC", "Bank of America Corporation"),
    _us_equity("DIS", "Walt Disney Company"),
    _us_equity("ADBE", "Adobe Inc."),
    _us_equity("NFLX", "Netflix Inc."),
    _us_equity("KO", "Coca-Cola Company"),
    _us_equity("PFE", "Pfizer Inc."),
    _us_equity("XOM", "Exxon Mobil Corporation"),
    _us_equity("VZ", "Verizon Communications Inc."),
    _us_equity("INTC", "Intel Corporation"),
    _us_equity("CSCO", "Cisco Systems Inc."),
    _us_equity("CRM", "Salesforce Inc."),
)

AVAILABLE_ROUTES = (
    "/health",
    "/company-quote/:symbol",
    "/company-news/:symbol",
    "/company-intraday/:symbol",
    "/company-search?keywords=",
    "/company-symbols/popular",
)

ENDPOINT_DESCRIPTIONS = {
    "/health": "Health check endpoint",
    "/company-quote/:symbol": "Get company quote data (GLOBAL_QUOTE)",
    "/company-news/:symbol": "Get company news sentiment",
    "/company-intraday/:symbol": "Get company intraday time series data",
    "/company-search?keywords=": "Search for company symbols by keywords",
    "/company-symbols/popular": "Get list of popular company symbols",
}

EXAMPLE_PATHS = {
    "quote": "/company-quote/IBM",
    "news": "/company-news/IBM",
    "intraday": "/company-intraday/IBM?interval=5min",
    "search": "/company-search?keywords=microsoft",
    "popular": "/company-symbols/popular",
}


def api_documentation(app_name: str, version: str) -> dict:
    return {
        "message": f"Welcome to {app_name}",
        "version": version,
        "endpoints": dict(ENDPOINT_DESCRIPTIONS),
        "examples": dict(EXAMPLE_PATHS),
        "note": "Replace :symbol with actual stock symbol (e.g., IBM, AAPL, GOOGL)",
    }


def popular_symbols() -> list:
    # fresh copies so callers can't mutate the module constant
    return [dict(entry) for entry in POPULAR_SYMBOLS]
