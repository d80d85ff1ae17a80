"""
API v1 routes.

Defines REST endpoints for the federation discovery API:
- POST /v1/federation/keys     - Load a remote user's public keys
- POST /v1/federation/init     - Discover a remote domain
- POST /v1/federation/validate - Validate an inbound federation request
- POST /v1/federation/userkeys - Local user key material for a peer
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_discovery_service, get_federation_validator
from src.api.models import (
    ErrorResponse,
    FederationRecordModel,
    InitFederationRequest,
    RemoteUserKeysRequest,
    UserInformationRequest,
    UserInformationResponse,
    ValidateFederationRequest,
)
from src.domain.discovery import FederationDiscoveryService
from src.domain.exceptions import FederationError
from src.domain.ports import FederationValidator

router = APIRouter(prefix="/federation", tags=["v1"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Federation failed"}}


def federation_error(exc: FederationError) -> HTTPException:
    """Translate a domain error into its fixed 400 response."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"code": status.HTTP_400_BAD_REQUEST, "message": exc.message},
    )


@router.post(
    "/keys",
    responses=_BAD_REQUEST,
    summary="Load remote user public keys",
    description="Discover the federation peer of the user's domain and "
    "request the user's public keys from it.",
)
async def load_remote_user_public_keys(
    request_data: RemoteUserKeysRequest,
    service: FederationDiscoveryService = Depends(get_discovery_service),
) -> Any:
    """
    Load public keys of a user on a remote domain.

    - **email**: Remote user's email address

    Returns the peer's response unmodified.
    """
    try:
        return await service.resolve_remote_user_keys(request_data.email)
    except FederationError as exc:
        raise federation_error(exc) from None


@router.post(
    "/init",
    response_model=list[FederationRecordModel],
    responses=_BAD_REQUEST,
    summary="Discover a federation domain",
    description="Return cached federation records for a domain, asking the "
    "public federation registry on a cache miss.",
)
async def init_federation(
    request_data: InitFederationRequest,
    service: FederationDiscoveryService = Depends(get_discovery_service),
) -> list[FederationRecordModel]:
    try:
        records = await service.discover_federation(request_data.domain)
    except FederationError as exc:
        raise federation_error(exc) from None
    return [FederationRecordModel(**record.to_dict()) for record in records]


@router.post(
    "/validate",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_BAD_REQUEST,
    summary="Validate an inbound federation request",
)
async def validate_incoming_federation_request(
    request_data: ValidateFederationRequest,
    validator: FederationValidator = Depends(get_federation_validator),
) -> None:
    try:
        await validator.validate_incoming_federation_request(
            request_data.checksum, request_data.body
        )
    except FederationError as exc:
        raise federation_error(exc) from None


@router.post(
    "/userkeys",
    response_model=UserInformationResponse,
    responses=_BAD_REQUEST,
    summary="Get local user keys for a peer",
)
async def get_user_keys(
    request_data: UserInformationRequest,
    validator: FederationValidator = Depends(get_federation_validator),
) -> UserInformationResponse:
    try:
        info = await validator.get_user_information(request_data.email, request_data.domain)
    except FederationError as exc:
        raise federation_error(exc) from None
    return UserInformationResponse(**info)
