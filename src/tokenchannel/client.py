"""
TokenChannel SDK Client for Python

Provides an async client for the TokenChannel challenge API.
"""

import json
import logging
import sys
from decimal import Decimal
from typing import Optional, List, Dict, Any, Union
from urllib.parse import quote

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from .config import (
    TOKENCHANNEL_BASE_URI,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    TokenChannelSettings,
)
from .models import (
    ChannelType,
    ChallengeOptions,
    ChallengeResponse,
    AuthenticateResponse,
    TestResponse,
    SMSPriceItem,
    VoicePriceItem,
    WhatsappPriceItem,
    ErrorInfo,
)
from .errors import (
    TokenChannelError,
    NetworkError,
    STATUSES_WITH_ERROR_INFO,
    error_for_status,
)


_render_key_values = structlog.processors.KeyValueRenderer(key_order=["event"])


def _render(logger, method_name, event_dict):
    """Render the event and point the stdlib record at the SDK call site."""
    frame = sys._getframe(1)
    stacklevel = 0
    while frame is not None and frame.f_globals.get("__name__", "").startswith("structlog"):
        frame = frame.f_back
        stacklevel += 1
    return (_render_key_values(logger, method_name, event_dict),), {"stacklevel": stacklevel}


# Routed through stdlib logging; the SDK never configures handlers.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    processors=[
        structlog.stdlib.filter_by_level,
        _render,
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)


def _segment(value: str) -> str:
    """Percent-encode a single URL path segment."""
    return quote(str(value), safe="")


class TokenChannel:
    """
    TokenChannel SDK Client.

    Every method issues a single request and either returns the decoded
    result or raises one of the errors in ``tokenchannel.errors``.

    Example:
        >>> async with TokenChannel(api_key="your-api-key") as client:
        ...     challenge = await client.challenge(ChannelType.SMS, "+15551234567")
        ...     result = await client.authenticate(challenge.request_id, "123456")
    """

    def __init__(
        self,
        api_key: str,
        *,
        test_mode: bool = False,
        base_url: str = TOKENCHANNEL_BASE_URI,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise TokenChannelError("API key is required")
        self.base_url = base_url.rstrip("/")
        self.test_mode = test_mode
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "X-Api-Key": api_key,
                "User-Agent": user_agent,
                "Accept": "application/json; utf-8",
            },
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[TokenChannelSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TokenChannel":
        """Build a client from settings, read from the environment when omitted."""
        settings = settings or TokenChannelSettings()
        return cls(
            settings.api_key,
            test_mode=settings.test_mode,
            base_url=settings.base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            transport=transport,
        )

    async def __aenter__(self) -> "TokenChannel":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    # ==================== Challenges ====================

    async def challenge(
        self,
        channel: Union[ChannelType, str],
        identifier: str,
        options: Optional[ChallengeOptions] = None,
    ) -> ChallengeResponse:
        """
        Create a challenge: generate a token and deliver it to ``identifier``
        through ``channel``.

        Raises InvalidIdentifierError, TargetOptOutError, BadRequestError,
        OutOfBalanceError, ForbiddenError, UnauthorizedError or
        QuotaExceededError.
        """
        if self.test_mode:
            options = (options or ChallengeOptions()).model_copy(update={"test": True})

        body: Dict[str, Any] = {}
        if options is not None:
            body = options.model_dump(by_alias=True, exclude_none=True, mode="json")

        try:
            channel = ChannelType(channel)
        except ValueError as exc:
            raise TokenChannelError(f"Unknown channel: {channel}") from exc

        response = await self._send(
            "POST",
            f"/challenge/{channel.value}/{_segment(identifier)}",
            body,
        )
        return self._handle_response(response, ChallengeResponse)

    async def authenticate(self, request_id: str, auth_code: str) -> AuthenticateResponse:
        """
        Verify a previously created challenge.

        Raises InvalidCodeError, BadRequestError, ChallengeClosedError,
        ChallengeExpiredError, ChallengeNotFoundError,
        MaxAttemptsExceededError, ForbiddenError, UnauthorizedError or
        QuotaExceededError.
        """
        response = await self._send(
            "POST",
            f"/authenticate/{_segment(request_id)}/{_segment(auth_code)}",
            {},
        )
        return self._handle_response(response, AuthenticateResponse)

    async def get_validation_code_by_test_challenge_id(self, request_id: str) -> TestResponse:
        """Get the validation code of a challenge created in test mode."""
        response = await self._send("GET", f"/test/{_segment(request_id)}")
        return self._handle_response(response, TestResponse)

    # ==================== Metadata ====================

    async def get_supported_countries(self) -> List[str]:
        """Get the countries where the service is available."""
        response = await self._send("GET", "/countries")
        return self._handle_response(response, List[str])

    async def get_supported_languages(self) -> List[str]:
        """Get the languages available for the notification templates."""
        response = await self._send("GET", "/languages")
        return self._handle_response(response, List[str])

    # ==================== Pricing ====================

    async def get_sms_prices(self) -> List[SMSPriceItem]:
        response = await self._send("GET", "/pricing/sms")
        return self._handle_response(response, List[SMSPriceItem])

    async def get_voice_prices(self) -> List[VoicePriceItem]:
        response = await self._send("GET", "/pricing/voice")
        return self._handle_response(response, List[VoicePriceItem])

    async def get_whatsapp_prices(self) -> List[WhatsappPriceItem]:
        response = await self._send("GET", "/pricing/whatsapp")
        return self._handle_response(response, List[WhatsappPriceItem])

    # ==================== Private Helpers ====================

    async def _send(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """Send one request, turning transport failures into NetworkError."""
        headers = {"Content-Type": "application/json"} if body is not None else None
        logger.debug("tokenchannel.request", method=method, path=path)
        try:
            response = await self._client.request(
                method, path, json=body, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "tokenchannel.network_error", method=method, path=path, error=str(exc)
            )
            raise NetworkError(f"{method} {path} failed: {exc}") from exc
        logger.debug(
            "tokenchannel.response", method=method, path=path, status=response.status_code
        )
        return response

    def _handle_response(self, response: httpx.Response, result_type: Any) -> Any:
        """Decode a 200 body as ``result_type`` or raise the mapped error."""
        if response.status_code == 200:
            return self._decode(response, result_type)

        error_info = None
        if response.status_code in STATUSES_WITH_ERROR_INFO:
            error_info = self._error_info(response)
        error = error_for_status(response.status_code, error_info)
        logger.warning(
            "tokenchannel.error_response",
            path=response.request.url.path,
            status=response.status_code,
            code=error.code,
        )
        raise error

    def _decode(self, response: httpx.Response, result_type: Any) -> Any:
        # Numbers are parsed as Decimal so prices keep their exact value.
        try:
            data = json.loads(response.text, parse_float=Decimal)
            return TypeAdapter(result_type).validate_python(data)
        except (ValueError, ValidationError) as exc:
            raise TokenChannelError("Unexpected response body") from exc

    def _error_info(self, response: httpx.Response) -> ErrorInfo:
        try:
            return ErrorInfo.model_validate_json(response.content)
        except ValidationError:
            logger.debug(
                "tokenchannel.unparseable_error_body", status=response.status_code
            )
            return ErrorInfo()
