from typing import Optional, Sequence


class GatewayError(Exception):
    """Base exception for market-data gateway failures."""

    status_code = 500
    code = "GatewayError"


class ConfigError(GatewayError):
    """Raised when process configuration is missing or invalid."""

    code = "ConfigError"


class MissingParameterError(GatewayError):
    """Raised when a required request parameter is absent or empty."""

    status_code = 400
    code = "MissingParameter"

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidParameterError(GatewayError):
    """Raised when a parameter value is outside its allowed set."""

    status_code = 400
    code = "InvalidParameter"

    def __init__(self, parameter: str, message: str, valid_values: Sequence[str]) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.valid_values = list(valid_values)


class UpstreamError(GatewayError):
    """Raised when the upstream market-data call fails or returns garbage."""

    code = "UpstreamFailure"

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status
