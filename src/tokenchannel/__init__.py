"""
TokenChannel SDK for Python

Provides an async client for the TokenChannel challenge API.

Example:
    >>> from tokenchannel import TokenChannel, ChannelType
    >>>
    >>> client = TokenChannel(api_key="your-api-key")
    >>>
    >>> # Send a code by SMS, then verify what the user typed
    >>> challenge = await client.challenge(ChannelType.SMS, "+15551234567")
    >>> result = await client.authenticate(challenge.request_id, "123456")
"""

from .client import TokenChannel
from .config import TokenChannelSettings, TOKENCHANNEL_BASE_URI
from .models import (
    ChannelType,
    CodeType,
    ChallengeOptions,
    ChallengeResponse,
    AuthenticateResponse,
    TestResponse,
    SMSPriceItem,
    VoicePriceItem,
    WhatsappPriceItem,
    FieldErrorResource,
    ErrorInfo,
)
from .errors import (
    TokenChannelError,
    NetworkError,
    InvalidCodeError,
    InvalidIdentifierError,
    TargetOptOutError,
    BadRequestError,
    ChallengeExpiredError,
    ChallengeClosedError,
    MaxAttemptsExceededError,
    ChallengeNotFoundError,
    UnauthorizedError,
    OutOfBalanceError,
    ForbiddenError,
    QuotaExceededError,
    error_for_status,
)

__version__ = "1.0.0"
__all__ = [
    "TokenChannel",
    "TokenChannelSettings",
    "TOKENCHANNEL_BASE_URI",
    "ChannelType",
    "CodeType",
    "ChallengeOptions",
    "ChallengeResponse",
    "AuthenticateResponse",
    "TestResponse",
    "SMSPriceItem",
    "VoicePriceItem",
    "WhatsappPriceItem",
    "FieldErrorResource",
    "ErrorInfo",
    "TokenChannelError",
    "NetworkError",
    "InvalidCodeError",
    "InvalidIdentifierError",
    "TargetOptOutError",
    "BadRequestError",
    "ChallengeExpiredError",
    "ChallengeClosedError",
    "MaxAttemptsExceededError",
    "ChallengeNotFoundError",
    "UnauthorizedError",
    "OutOfBalanceError",
    "ForbiddenError",
    "QuotaExceededError",
    "error_for_status",
]
