from matty.domains.identity.entities import User
from matty.domains.identity.schemas import UserRegister, UserLogin

__all__ = [
    "User",
    "UserRegister",
    "UserLogin",
]
