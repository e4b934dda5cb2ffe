"""Auth API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import CurrentUser, RoleResolver, get_current_user, get_role_resolver
from poloclub.database import get_db
from poloclub.schemas import SignInRequest, SignUpRequest, TokenResponse, UserResponse
from poloclub.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def sign_up(
    data: SignUpRequest,
    db: AsyncSession = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """Create an account and sign it in."""
    service = AuthService(db, resolver)
    return await service.sign_up(data)


@router.post("/login", response_model=TokenResponse)
async def sign_in(
    data: SignInRequest,
    db: AsyncSession = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
):
    """Exchange e-mail and password for an access token."""
    service = AuthService(db, resolver)
    return await service.sign_in(data)


@router.post("/logout", status_code=204)
async def sign_out(user: CurrentUser = Depends(get_current_user)):
    """Tokens are stateless; the client discards its copy."""
    return None


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the signed-in identity and its roles."""
    return AuthService(db).describe(user)
