"""
TokenChannel SDK Data Models

Pydantic models for the TokenChannel API payloads.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


# ==================== Enums ====================

class ChannelType(str, Enum):
    SMS = "sms"
    VOICE = "voice"
    EMAIL = "email"
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"


class CodeType(str, Enum):
    NUMERIC = "NUMERIC"
    ALPHA_LOWERCASE = "ALPHA_LOWERCASE"
    ALPHA_UPPERCASE = "ALPHA_UPPERCASE"
    ALPHANUMERIC = "ALPHANUMERIC"


# ==================== Challenge ====================

class ChallengeOptions(BaseModel):
    """Challenge workflow configuration. Unset fields use the account defaults."""
    language: Optional[str] = None
    test: Optional[bool] = None
    code_type: Optional[CodeType] = Field(None, alias="codeType")
    code_length: Optional[int] = Field(None, alias="codeLength", gt=0)
    max_attempts: Optional[int] = Field(None, alias="maxAttempts", gt=0)
    expiration_in_minutes: Optional[int] = Field(
        None, alias="expirationInMinutes", gt=0
    )
    tracking_id: Optional[str] = Field(None, alias="trackingId")

    class Config:
        populate_by_name = True


class ChallengeResponse(BaseModel):
    request_id: str = Field(..., alias="requestId")

    class Config:
        populate_by_name = True


class AuthenticateResponse(BaseModel):
    identifier: Optional[str] = None
    channel: Optional[ChannelType] = None
    tracking_id: Optional[str] = Field(None, alias="trackingId")

    class Config:
        populate_by_name = True


class TestResponse(BaseModel):
    validation_code: str = Field(..., alias="validationCode")

    class Config:
        populate_by_name = True


# ==================== Pricing ====================

class SMSPriceItem(BaseModel):
    code: str
    country: str
    price: Decimal


class VoicePriceItem(BaseModel):
    code: str
    country: str
    type: Optional[str] = None
    price: Decimal


class WhatsappPriceItem(BaseModel):
    code: str
    country: str
    price: Decimal


# ==================== Errors ====================

class FieldErrorResource(BaseModel):
    target: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None


class ErrorInfo(BaseModel):
    """
    Error document returned with a non-2xx response.

    ``code`` is a service defined identifier, more specific than the HTTP
    status. ``message`` is meant for developers, not end users. ``details``
    lists the related field errors, in order.
    """
    code: Optional[str] = None
    message: Optional[str] = None
    details: List[FieldErrorResource] = Field(default_factory=list)

    @field_validator("details", mode="before")
    @classmethod
    def null_details_to_empty(cls, value):
        return [] if value is None else value
