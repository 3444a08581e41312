import logging
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from matty.core.config import Settings
from matty.core.exceptions import BadRequest, Unauthorized
from matty.core.security import create_access_token
from matty.db.repositories.user_repository import UserRepository
from matty.domains.identity.entities import User

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис регистрации и входа пользователей"""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repository = UserRepository(session)

    async def register_user(self, username: str, email: str, password: str) -> Tuple[User, str]:
        """Регистрация нового пользователя"""
        if await self.user_repository.exists(email, username):
            raise BadRequest("User already exists")

        user = await self.user_repository.create(
            User.create_user(email=email, username=username, password=password)
        )
        logger.info(f"Registered user {user.id}")

        return user, self.issue_token(user)

    async def login_user(self, email: str, password: str) -> Tuple[User, str]:
        """Вход пользователя и создание JWT токена"""
        user = await self.user_repository.get_by_email(email)

        if not user or not user.authenticate(password):
            logger.info("Rejected login attempt")
            raise Unauthorized("Invalid credentials")

        return user, self.issue_token(user)

    def issue_token(self, user: User) -> str:
        return create_access_token(user.id, self.settings)
