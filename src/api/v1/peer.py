"""
Peer-facing federation endpoint.

Federation peers call POST /api/v1/federation/user with a body sealed
for this service's key and the checksum in X-Federation-Checksum.
"""

from fastapi import APIRouter, Depends, Header

from src.api.dependencies import get_federation_validator
from src.api.models import ErrorResponse, PeerUserKeysRequest, UserInformationResponse
from src.api.v1.routes import federation_error
from src.domain.exceptions import FederationError
from src.domain.ports import FederationValidator

router = APIRouter(prefix="/federation", tags=["federation"])


@router.post(
    "/user",
    response_model=UserInformationResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid federation request"}},
    summary="Answer a peer's user-key request",
)
async def peer_user_keys(
    request_data: PeerUserKeysRequest,
    x_federation_checksum: str = Header(...),
    validator: FederationValidator = Depends(get_federation_validator),
) -> UserInformationResponse:
    """
    Validate a peer's sealed request and return the user's public keys.

    The checksum covers the sealed body exactly as it was sent.
    """
    try:
        await validator.validate_incoming_federation_request(
            x_federation_checksum, request_data.model_dump()
        )
        info = await validator.get_user_information(
            request_data.encryptedEmail, request_data.encryptedDomain
        )
    except FederationError as exc:
        raise federation_error(exc) from None
    return UserInformationResponse(**info)
