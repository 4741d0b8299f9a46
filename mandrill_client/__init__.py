__version__ = "0.1.0"

from .client import Mandrill
from .errors import (
    ERROR_MAP,
    ConfigurationError,
    MandrillClientError,
    ProtocolError,
    ServiceError,
    TransportError,
    UnexpectedResponseError,
)
from .errors_utils import classify_error

__all__ = [
    "Mandrill",
    "ERROR_MAP",
    "ConfigurationError",
    "MandrillClientError",
    "ProtocolError",
    "ServiceError",
    "TransportError",
    "UnexpectedResponseError",
    "classify_error",
]
