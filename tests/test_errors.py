import pytest

from tokenchannel.errors import (
    TokenChannelError,
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
from tokenchannel.models import ErrorInfo, FieldErrorResource


@pytest.mark.parametrize(
    "status_code, code, expected",
    [
        (400, "InvalidCode", InvalidCodeError),
        (400, "InvalidIdentifier", InvalidIdentifierError),
        (400, "OptOut", TargetOptOutError),
        (400, "InvalidValue", BadRequestError),
        (400, None, BadRequestError),
        (404, "ChallengeExpired", ChallengeExpiredError),
        (404, "ChallengeClosed", ChallengeClosedError),
        (404, "MaxAttemptsExceeded", MaxAttemptsExceededError),
        (404, "NotFound", ChallengeNotFoundError),
        (404, None, ChallengeNotFoundError),
        (401, None, UnauthorizedError),
        (402, None, OutOfBalanceError),
        (403, None, ForbiddenError),
        (429, None, QuotaExceededError),
    ],
)
def test_known_statuses_map_to_their_error(status_code, code, expected):
    error = error_for_status(status_code, ErrorInfo(code=code))
    assert type(error) is expected


@pytest.mark.parametrize("code", ["InvalidCode", "OptOut", "ChallengeExpired", None])
def test_status_only_errors_ignore_the_body_code(code):
    error = error_for_status(429, ErrorInfo(code=code))
    assert type(error) is QuotaExceededError


def test_404_codes_are_not_matched_on_400():
    assert type(error_for_status(400, ErrorInfo(code="ChallengeExpired"))) is BadRequestError
    assert type(error_for_status(404, ErrorInfo(code="InvalidCode"))) is ChallengeNotFoundError


@pytest.mark.parametrize("status_code", [201, 302, 405, 418, 500, 503])
def test_unmapped_status_is_generic_error(status_code):
    error = error_for_status(status_code)
    assert type(error) is TokenChannelError
    assert str(error) == "Unexpected error response"


def test_invalid_identifier_carries_service_message():
    error = error_for_status(400, ErrorInfo(code="InvalidIdentifier", message="bad number"))
    assert error.message == "bad number"
    assert str(error) == "bad number"


def test_bad_request_carries_error_info():
    info = ErrorInfo(
        code="InvalidValue",
        message="invalid options",
        details=[
            FieldErrorResource(target="codeLength", code="Min", message="too short"),
            FieldErrorResource(target="language", code="Unsupported", message="unknown"),
        ],
    )
    error = error_for_status(400, info)
    assert isinstance(error, BadRequestError)
    assert error.error_info is info
    assert [d.target for d in error.error_info.details] == ["codeLength", "language"]
    assert error.code == "InvalidValue"


def test_missing_error_info_is_treated_as_no_code():
    assert type(error_for_status(400)) is BadRequestError
    assert type(error_for_status(404)) is ChallengeNotFoundError


def test_domain_errors_are_token_channel_errors():
    for status_code in (400, 401, 402, 403, 404, 429):
        assert isinstance(error_for_status(status_code), TokenChannelError)


def test_null_details_decode_as_empty_list():
    info = ErrorInfo.model_validate_json('{"code": "InvalidValue", "message": "m", "details": null}')
    error = error_for_status(400, info)

    assert isinstance(error, BadRequestError)
    assert error.error_info.details == []
    assert list(error.error_info.details) == []
