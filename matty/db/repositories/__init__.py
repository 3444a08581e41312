from matty.db.repositories.user_repository import UserRepository
from matty.db.repositories.design_repository import DesignRepository

__all__ = [
    "UserRepository",
    "DesignRepository",
]
