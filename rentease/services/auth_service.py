"""
Auth Service
Session shim: login, registration, logout and password reset.

This is NOT credential verification. Passwords are never stored; login only
checks that the account is active and the password is long enough, then
issues a signed bearer token that identifies the session.
"""
import logging
from datetime import timedelta
from typing import Optional

from rentease.core.config import Settings, get_settings
from rentease.core.security import create_access_token, decode_access_token
from rentease.models.activity import ActivityType
from rentease.models.user import User, UserRole, UserStatus
from rentease.schemas.auth import AuthUser, RegisterRequest
from rentease.services.activity_service import ActivityService
from rentease.services.result import ServiceResult
from rentease.services.user_service import UserService
from rentease.storage import CollectionKey, KeyValueStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
RESET_LINK_SENT = "If the email exists, a reset link has been sent"


class AuthService:
    def __init__(
        self,
        store: KeyValueStore,
        users: UserService,
        activities: ActivityService,
        settings: Optional[Settings] = None,
    ) -> None:
        self.store = store
        self.users = users
        self.activities = activities
        self.settings = settings or get_settings()

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            {"sub": user.id, "role": user.role},
            expires_delta=timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            secret_key=self.settings.SECRET_KEY,
            algorithm=self.settings.ALGORITHM,
        )

    def login(self, email: str, password: str) -> ServiceResult[AuthUser]:
        user = self.users.find_by_email(email)
        if not user:
            logger.warning(f"Login failed: unknown email {email}")
            return ServiceResult.invalid(INVALID_CREDENTIALS)

        if len(password or "") < self.settings.MIN_PASSWORD_LENGTH:
            logger.warning(f"Login failed: short password for {email}")
            return ServiceResult.invalid(INVALID_CREDENTIALS)

        if user.status == UserStatus.PENDING.value:
            return ServiceResult.invalid("Account is pending approval")
        if user.status != UserStatus.ACTIVE.value:
            return ServiceResult.invalid("Account is suspended")

        session = AuthUser(**user.model_dump(), token=self._issue_token(user))
        self.store.set(CollectionKey.AUTH_SESSION, session.model_dump(mode="json", by_alias=True))

        logger.info(f"User logged in: {user.email} ({user.role})")
        return ServiceResult.ok(session, "Login successful")

    def register(self, request: RegisterRequest) -> ServiceResult[User]:
        """Create an active account; the caller decides whether to log in afterwards."""
        if len(request.password or "") < self.settings.MIN_PASSWORD_LENGTH:
            return ServiceResult.invalid(
                f"Password must be at least {self.settings.MIN_PASSWORD_LENGTH} characters"
            )

        role = UserRole.LANDLORD if request.role == UserRole.LANDLORD.value else UserRole.TENANT

        with self.store.lock:
            if self.users.find_by_email(request.email):
                logger.warning(f"Registration failed: {request.email} already registered")
                return ServiceResult.invalid("Email already registered")

            result = self.users.create(
                {
                    "email": request.email,
                    "first_name": request.first_name,
                    "last_name": request.last_name,
                    "phone": request.phone,
                    "role": role,
                    "status": UserStatus.ACTIVE,
                }
            )
            if not result.success:
                return result

            user = result.data
            self.activities.log(
                ActivityType.USER_CREATED,
                user.id,
                f"New {user.role} registered: {user.full_name or user.email}",
                {"email": user.email, "role": user.role},
            )

        return ServiceResult.ok(user, "Registration successful")

    def logout(self) -> ServiceResult[None]:
        self.store.delete(CollectionKey.AUTH_SESSION)
        return ServiceResult.ok(None, "Logged out")

    def reset_password(self, email: str) -> ServiceResult[None]:
        # Same answer whether or not the account exists
        logger.info("Password reset requested")
        return ServiceResult.ok(None, RESET_LINK_SENT)

    def current_session(self) -> ServiceResult[AuthUser]:
        raw = self.store.get(CollectionKey.AUTH_SESSION)
        if not raw:
            return ServiceResult.not_found("No active session")
        return ServiceResult.ok(AuthUser.model_validate(raw))

    def resolve_token(self, token: str) -> ServiceResult[User]:
        """Map a bearer token back to its user."""
        payload = decode_access_token(
            token,
            secret_key=self.settings.SECRET_KEY,
            algorithm=self.settings.ALGORITHM,
        )
        if not payload or not payload.get("sub"):
            return ServiceResult.invalid("Could not validate credentials")
        return self.users.get_by_id(payload["sub"])
