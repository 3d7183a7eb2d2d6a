import json


class KycError(Exception):
    """Base class for every failure of a single verification attempt."""

    status_code = 400


class KycValidationError(KycError, ValueError):
    pass


class ProviderError(KycError):
    status_code = 502

    def __init__(self, message, *, http_status=None, body=None):
        super().__init__(message)
        self.http_status = http_status
        self.body = body


class ProviderUnavailableError(ProviderError):
    pass


class RateLimitError(ProviderError):
    status_code = 429


class InvalidResponseError(ProviderError):
    def __init__(self, message="Invalid response from Paystack API", **kwargs):
        super().__init__(message, **kwargs)


class ApplicationNotFound(KycError):
    status_code = 404


class KycStateError(KycError):
    status_code = 409


# Phrases Paystack uses when a sandbox key runs out of quota. Matched
# case-insensitively against the raw error body.
RATE_LIMIT_PHRASES = (
    "test mode daily limit",
    "test bank codes",
    "rate limit",
    "too many requests",
)


def provider_message(body: str, reason: str | None = None) -> str:
    """Best human-readable message out of a provider error body."""
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        data = None

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    if body:
        return body
    return reason or "Unknown error"


def classify_provider_error(status_code: int, body: str, reason: str | None = None) -> ProviderError:
    """
    Turn a non-2xx provider response into the matching exception.

    The only place that decides what counts as a rate-limit condition.
    """
    lowered = (body or "").lower()
    message = f"Paystack API error: {provider_message(body, reason)}"

    if status_code == 429 or any(phrase in lowered for phrase in RATE_LIMIT_PHRASES):
        return RateLimitError(message, http_status=status_code, body=body)

    return ProviderError(message, http_status=status_code, body=body)
