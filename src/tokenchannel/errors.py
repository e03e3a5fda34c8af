"""
TokenChannel SDK Error Classes

Exception types raised by the client and the table that maps an HTTP
response onto them.
"""

from typing import Dict, Optional, Type

from .models import ErrorInfo


class TokenChannelError(Exception):
    """Base exception for TokenChannel SDK errors."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR"):
        super().__init__(message)
        self.message = message
        self.code = code


class NetworkError(TokenChannelError):
    """Raised when the request could not be sent or no response arrived."""

    def __init__(self, message: str):
        super().__init__(message, "NETWORK_ERROR")


class InvalidCodeError(TokenChannelError):
    """Raised when the token or validation code is invalid."""

    def __init__(self, message: str = "Invalid validation code"):
        super().__init__(message, "InvalidCode")


class InvalidIdentifierError(TokenChannelError):
    """Raised when the identifier is not valid for the given channel."""

    def __init__(self, message: str = "Invalid identifier"):
        super().__init__(message, "InvalidIdentifier")


class TargetOptOutError(TokenChannelError):
    """Raised when the target user opted out of the service on this channel."""

    def __init__(self, message: str = "Target opted out"):
        super().__init__(message, "OptOut")


class BadRequestError(TokenChannelError):
    """
    Raised when a request value is invalid.

    ``error_info`` describes the offending fields in ``details``.
    """

    def __init__(self, error_info: Optional[ErrorInfo] = None):
        self.error_info = error_info or ErrorInfo()
        super().__init__(
            self.error_info.message or "Bad request",
            self.error_info.code or "BadRequest",
        )


class ChallengeExpiredError(TokenChannelError):
    """Raised when the challenge validity is over."""

    def __init__(self, message: str = "Challenge expired"):
        super().__init__(message, "ChallengeExpired")


class ChallengeClosedError(TokenChannelError):
    """Raised when the challenge is closed and no interaction is expected."""

    def __init__(self, message: str = "Challenge closed"):
        super().__init__(message, "ChallengeClosed")


class MaxAttemptsExceededError(TokenChannelError):
    """Raised when the allowed number of authentication attempts is reached."""

    def __init__(self, message: str = "Max attempts exceeded"):
        super().__init__(message, "MaxAttemptsExceeded")


class ChallengeNotFoundError(TokenChannelError):
    """Raised when no challenge exists for a well formed request id."""

    def __init__(self, message: str = "Challenge not found"):
        super().__init__(message, "ChallengeNotFound")


class UnauthorizedError(TokenChannelError):
    """Raised when the API key is invalid."""

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message, "Unauthorized")


class OutOfBalanceError(TokenChannelError):
    """Raised when the balance cannot pay for the challenge."""

    def __init__(self, message: str = "Out of balance"):
        super().__init__(message, "OutOfBalance")


class ForbiddenError(TokenChannelError):
    """Raised when the API key is not allowed to perform the action."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, "Forbidden")


class QuotaExceededError(TokenChannelError):
    """Raised when the sandbox quota, QPS or QPM limit is exceeded."""

    def __init__(self, message: str = "Quota exceeded"):
        super().__init__(message, "QuotaExceeded")


# ==================== Classification ====================

STATUS_ERRORS: Dict[int, Type[TokenChannelError]] = {
    401: UnauthorizedError,
    402: OutOfBalanceError,
    403: ForbiddenError,
    429: QuotaExceededError,
}

NOT_FOUND_ERRORS: Dict[str, Type[TokenChannelError]] = {
    "ChallengeExpired": ChallengeExpiredError,
    "ChallengeClosed": ChallengeClosedError,
    "MaxAttemptsExceeded": MaxAttemptsExceededError,
}

# Status codes whose body is an ErrorInfo document worth decoding.
STATUSES_WITH_ERROR_INFO = frozenset({400, 404})


def _bad_request(error_info: ErrorInfo) -> TokenChannelError:
    if error_info.code == "InvalidCode":
        return InvalidCodeError()
    if error_info.code == "InvalidIdentifier":
        if error_info.message:
            return InvalidIdentifierError(error_info.message)
        return InvalidIdentifierError()
    if error_info.code == "OptOut":
        return TargetOptOutError()
    return BadRequestError(error_info)


def _not_found(error_info: ErrorInfo) -> TokenChannelError:
    error_class = NOT_FOUND_ERRORS.get(error_info.code or "", ChallengeNotFoundError)
    return error_class()


def error_for_status(
    status_code: int, error_info: Optional[ErrorInfo] = None
) -> TokenChannelError:
    """
    Map a non-200 response onto the exception the caller should see.

    ``error_info`` is only consulted for 400 and 404; every other status
    is classified by its code alone. Unknown statuses produce a plain
    TokenChannelError.
    """
    if status_code == 400:
        return _bad_request(error_info or ErrorInfo())
    if status_code == 404:
        return _not_found(error_info or ErrorInfo())
    error_class = STATUS_ERRORS.get(status_code)
    if error_class is not None:
        return error_class()
    return TokenChannelError("Unexpected error response")
