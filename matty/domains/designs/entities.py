import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class Design:
    """Сущность дизайна: документ редактора, принадлежащий одному пользователю"""

    def __init__(
        self,
        id: uuid.UUID,
        owner_id: uuid.UUID,
        title: str,
        canvas_data: Dict[str, Any],
        thumbnail: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.owner_id = owner_id
        self.title = title
        # Состояние холста храним как есть, схема не проверяется
        self.canvas_data = canvas_data
        self.thumbnail = thumbnail
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or self.created_at

    @classmethod
    def create_design(
        cls,
        owner_id: uuid.UUID,
        title: str,
        canvas_data: Dict[str, Any],
        thumbnail: Optional[str] = None
    ) -> "Design":
        """Создание нового дизайна"""
        return cls(
            id=uuid.uuid4(),
            owner_id=owner_id,
            title=title,
            canvas_data=canvas_data,
            thumbnail=thumbnail or ""
        )

    def to_dict(self) -> Dict[str, Any]:
        """Представление для ответа API"""
        return {
            "id": str(self.id),
            "ownerId": str(self.owner_id),
            "title": self.title,
            "canvasData": self.canvas_data,
            "thumbnail": self.thumbnail,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Design):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Design(id={self.id}, owner_id={self.owner_id}, title={self.title})"
