from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from app.modules.auth.service import AuthService
from app.modules.users.schemas import UserResponse
from app.modules.users.service import UserService
from app.core.authorization import Principal
from app.core.dependencies import get_current_principal
from app.core.responses import ApiResponse
from supabase import Client

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


@router.post("/register", response_model=ApiResponse[UserResponse], status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return ApiResponse.ok(service.register(register_data), "User registered successfully")


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return ApiResponse.ok(service.login(login_data), "Login successful")


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_current_user(
    principal: Principal = Depends(get_current_principal),
    supabase: Client = Depends(get_supabase),
):
    """Get the current authenticated user"""
    return ApiResponse.ok(UserService(supabase).get_user(principal.id))
