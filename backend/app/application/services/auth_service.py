"""Login, signup and logout.

There are no passwords: a login is an email lookup. The session view comes
from the role stored on the user. A role submitted with the login must match
the stored role, otherwise the login is refused.
"""

import logging
from dataclasses import dataclass

from app.application.schemas.auth import LoginRequest, SessionView, SignupRequest
from app.application.schemas.user import UserCreate
from app.application.services.audit_log_service import AuditLogService
from app.application.services.user_service import UserService
from app.domain.entities import User, UserRole
from app.domain.exceptions import AuthenticationError, DuplicateEntityError

logger = logging.getLogger(__name__)


@dataclass
class AuthSession:
    user: User
    view: SessionView


def view_for(user: User) -> SessionView:
    if user.role == UserRole.ADMIN:
        return SessionView.ADMIN_DASHBOARD
    return SessionView.USER_PORTAL


class AuthService:

    def __init__(self, user_service: UserService, audit_log: AuditLogService):
        self._users = user_service
        self._audit_log = audit_log

    async def login(self, request: LoginRequest) -> AuthSession:
        user = await self._users.find_by_email(request.email)
        if user is None:
            logger.info("Login refused for unknown email %s", request.email)
            raise AuthenticationError(request.email, "No user with this email")
        if request.role is not None and request.role != user.role:
            logger.info(
                "Login refused for %s: submitted role %s, stored role %s",
                request.email,
                request.role.value,
                user.role.value,
            )
            raise AuthenticationError(request.email, "Role does not match this account")

        await self._audit_log.add_log("LOGIN", f"User {user.email} logged in")
        return AuthSession(user=user, view=view_for(user))

    async def signup(self, request: SignupRequest) -> AuthSession:
        if await self._users.find_by_email(request.email) is not None:
            raise DuplicateEntityError("User", "email", request.email)

        user = await self._users.add_user(
            UserCreate(
                name=request.name,
                email=request.email,
                role=UserRole.USER,
                position="New Member",
                department="General",
                phone="",
            )
        )
        return AuthSession(user=user, view=view_for(user))

    async def logout(self, user_id: str) -> None:
        user = await self._users.get_user(user_id)
        await self._audit_log.add_log("LOGOUT", f"User {user.email} logged out")
