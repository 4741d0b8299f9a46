from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


class MandrillClientError(Exception):
    """Base client error."""


class ConfigurationError(MandrillClientError):
    """No usable API key could be resolved."""


class TransportError(MandrillClientError):
    """Transport/network layer error."""


class ProtocolError(MandrillClientError):
    """Response body could not be decoded as JSON."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class UnexpectedResponseError(MandrillClientError):
    """Error response that does not follow the status/name envelope."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message)
        self.body = body


class ServiceError(MandrillClientError):
    """Error reported by the API. Subclasses narrow it down by server error name."""

    error_name: str | None = None

    def __init__(
            self,
            message: str | None,
            code: Any = None,
            *,
            status_code: int | None = None,
            error_name: str | None = None,
    ):
        super().__init__(message if message is not None else "")
        self.message = message
        self.code = code
        self.status_code = status_code
        if error_name is not None:
            self.error_name = error_name


class ValidationError(ServiceError):
    error_name = "ValidationError"


class InvalidKeyError(ServiceError):
    error_name = "Invalid_Key"


class PaymentRequiredError(ServiceError):
    error_name = "PaymentRequired"


class UnknownSubaccountError(ServiceError):
    error_name = "Unknown_Subaccount"


class UnknownTemplateError(ServiceError):
    error_name = "Unknown_Template"


class ServiceUnavailableError(ServiceError):
    error_name = "ServiceUnavailable"


class UnknownMessageError(ServiceError):
    error_name = "Unknown_Message"


class InvalidTagNameError(ServiceError):
    error_name = "Invalid_Tag_Name"


class InvalidRejectError(ServiceError):
    error_name = "Invalid_Reject"


class UnknownSenderError(ServiceError):
    error_name = "Unknown_Sender"


class UnknownUrlError(ServiceError):
    error_name = "Unknown_Url"


class UnknownTrackingDomainError(ServiceError):
    error_name = "Unknown_TrackingDomain"


class InvalidTemplateError(ServiceError):
    error_name = "Invalid_Template"


class UnknownWebhookError(ServiceError):
    error_name = "Unknown_Webhook"


class UnknownInboundDomainError(ServiceError):
    error_name = "Unknown_InboundDomain"


class UnknownInboundRouteError(ServiceError):
    error_name = "Unknown_InboundRoute"


class UnknownExportError(ServiceError):
    error_name = "Unknown_Export"


class IPProvisionLimitError(ServiceError):
    error_name = "IP_ProvisionLimit"


class UnknownPoolError(ServiceError):
    error_name = "Unknown_Pool"


class NoSendingHistoryError(ServiceError):
    error_name = "NoSendingHistory"


class PoorReputationError(ServiceError):
    error_name = "PoorReputation"


class UnknownIPError(ServiceError):
    error_name = "Unknown_IP"


class InvalidEmptyDefaultPoolError(ServiceError):
    error_name = "Invalid_EmptyDefaultPool"


class InvalidDeleteDefaultPoolError(ServiceError):
    error_name = "Invalid_DeleteDefaultPool"


class InvalidDeleteNonEmptyPoolError(ServiceError):
    error_name = "Invalid_DeleteNonEmptyPool"


class InvalidCustomDNSError(ServiceError):
    error_name = "Invalid_CustomDNS"


class InvalidCustomDNSPendingError(ServiceError):
    error_name = "Invalid_CustomDNSPending"


class MetadataFieldLimitError(ServiceError):
    error_name = "Metadata_FieldLimit"


class UnknownMetadataFieldError(ServiceError):
    error_name = "Unknown_MetadataField"


_SPECIFIC_ERRORS: tuple[type[ServiceError], ...] = (
    ValidationError,
    InvalidKeyError,
    PaymentRequiredError,
    UnknownSubaccountError,
    UnknownTemplateError,
    ServiceUnavailableError,
    UnknownMessageError,
    InvalidTagNameError,
    InvalidRejectError,
    UnknownSenderError,
    UnknownUrlError,
    UnknownTrackingDomainError,
    InvalidTemplateError,
    UnknownWebhookError,
    UnknownInboundDomainError,
    UnknownInboundRouteError,
    UnknownExportError,
    IPProvisionLimitError,
    UnknownPoolError,
    NoSendingHistoryError,
    PoorReputationError,
    UnknownIPError,
    InvalidEmptyDefaultPoolError,
    InvalidDeleteDefaultPoolError,
    InvalidDeleteNonEmptyPoolError,
    InvalidCustomDNSError,
    InvalidCustomDNSPendingError,
    MetadataFieldLimitError,
    UnknownMetadataFieldError,
)

# server error name -> exception class
ERROR_MAP: Mapping[str, type[ServiceError]] = MappingProxyType(
    {cls.error_name: cls for cls in _SPECIFIC_ERRORS}
)
