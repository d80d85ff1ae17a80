"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, EmailStr, Field


class RemoteUserKeysRequest(BaseModel):
    """Request model for loading a remote user's public keys."""

    email: EmailStr


class InitFederationRequest(BaseModel):
    """Request model for discovering a remote domain."""

    domain: str = Field(..., min_length=1, max_length=253, description="Remote domain")


class SrvTargetModel(BaseModel):
    """DNS SRV target of a federation peer."""

    name: str
    port: int
    priority: int
    weight: int


class FederationRecordModel(BaseModel):
    """Response model for one discovered federation record."""

    domain: str
    created: str
    publickey: str
    srv: list[SrvTargetModel]


class ValidateFederationRequest(BaseModel):
    """Request model for validating an inbound federation request."""

    checksum: str
    body: Any


class UserInformationRequest(BaseModel):
    """Request model for local user key material (values may be sealed)."""

    email: str = Field(..., min_length=1)
    domain: str = Field(..., min_length=1)


class PeerUserKeysRequest(BaseModel):
    """Sealed user-key request sent by a federation peer."""

    encryptedEmail: str = Field(..., min_length=1)
    encryptedDomain: str = Field(..., min_length=1)


class UserInformationResponse(BaseModel):
    """Response model for local user key material."""

    email: str
    domain: str
    publicKeys: list[str]


class ErrorDetail(BaseModel):
    """Fixed, non-leaking federation error."""

    code: int
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: ErrorDetail | str
