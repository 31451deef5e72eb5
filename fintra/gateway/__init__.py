from .schema import OperationKind, OperationRequest, UpstreamQuery, SymbolMatch
from .operations import build_request, build_upstream_query, execute
from .upstream import AlphaVantageClient

__all__ = [
    "OperationKind",
    "OperationRequest",
    "UpstreamQuery",
    "SymbolMatch",
    "build_request",
    "build_upstream_query",
    "execute",
    "AlphaVantageClient",
]
