import logging

from supabase import Client

from app.core.enums import UserRole
from app.core.errors import AlreadyExists, Unauthorized
from app.core.models import new_id, utcnow
from app.core.security import create_access_token, hash_password, verify_password
from app.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from app.modules.users.models import User, normalize_email
from app.modules.users.repository import UserRepository
from app.modules.users.schemas import UserResponse

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.users = UserRepository(supabase)

    def register(self, register_data: RegisterRequest) -> User:
        """Register a new user with the member role"""
        email = normalize_email(register_data.email)
        if self.users.find_by_email(email) is not None:
            raise AlreadyExists("User with this email already exists")
        now = utcnow()
        user = self.users.create(User(
            id=new_id(),
            email=email,
            password_hash=hash_password(register_data.password),
            name=register_data.name,
            role=UserRole.MEMBER,
            created_at=now,
            updated_at=now,
        ))
        logger.info("User registered: %s", user.id)
        return user

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Check credentials and issue an access token"""
        email = normalize_email(login_data.email)
        user = self.users.find_by_email(email)
        if user is None or not verify_password(login_data.password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise Unauthorized("Invalid email or password")
        token = create_access_token(user.id, user.email, user.role.value)
        return TokenResponse(token=token, user=UserResponse(**user.model_dump()))
