from matty.db.models.user import User
from matty.db.models.design import Design

__all__ = [
    "User",
    "Design",
]
