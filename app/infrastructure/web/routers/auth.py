"""
Authentication router.
Issues session tokens for callers identified by email.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from app.application.dto.auth_dto import TokenRequestDTO, TokenResponseDTO
from app.infrastructure.auth import JWTHandler, get_jwt_handler


router = APIRouter()


@router.post("/jwt", response_model=TokenResponseDTO)
async def issue_token(
    request: TokenRequestDTO,
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
):
    """
    Sign the submitted claims into a token valid for one hour.

    - **email**: Caller email (required); any other claims are signed as sent
    """
    token = jwt_handler.issue_token(request.to_document())
    return TokenResponseDTO(token=token)
