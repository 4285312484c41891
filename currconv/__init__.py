from .client import APIClient, AsyncAPIClient, Config
from .errors import (
    CurrencyConverterError,
    DecodeError,
    InvalidConfiguration,
    RemoteError,
    TransportError,
    ValidationError,
)
from .log import configure_logging
from .models import (
    Convert,
    ConvertCompact,
    ConvertHistorical,
    ConvertHistoricalCompact,
    ConvertHistoricalRequest,
    ConvertRequest,
    Country,
    Currency,
    Usage,
)

from ._version import __version__

__all__ = [
    "APIClient",
    "AsyncAPIClient",
    "Config",
    "configure_logging",
    "CurrencyConverterError",
    "ValidationError",
    "InvalidConfiguration",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "ConvertRequest",
    "ConvertHistoricalRequest",
    "Convert",
    "ConvertCompact",
    "ConvertHistorical",
    "ConvertHistoricalCompact",
    "Currency",
    "Country",
    "Usage",
]
