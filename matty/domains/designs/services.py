import logging
import uuid
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from matty.core.exceptions import NotFound
from matty.db.repositories.design_repository import DesignRepository
from matty.domains.designs.entities import Design

logger = logging.getLogger(__name__)

class DesignNotFound(NotFound):
    message = "Design not found"


class DesignService:
    """Сервис для работы с дизайнами.

    Все операции получают идентификатор вызывающего. Чужой дизайн
    неотличим от несуществующего: в обоих случаях DesignNotFound.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.design_repository = DesignRepository(session)

    async def list_designs(self, owner_id: uuid.UUID) -> List[Design]:
        """Дизайны владельца, новые первыми"""
        return await self.design_repository.list_by_owner(owner_id)

    async def get_design(self, design_id: uuid.UUID, owner_id: uuid.UUID) -> Design:
        """Получение дизайна владельца"""
        design = await self.design_repository.get_owned(design_id, owner_id)
        if design is None:
            raise DesignNotFound()
        return design

    async def create_design(self, owner_id: uuid.UUID, data: Dict[str, Any]) -> Design:
        """Создание дизайна; владелец берется только из аутентификации"""
        design = Design.create_design(
            owner_id=owner_id,
            title=data["title"],
            canvas_data=data["canvas_data"],
            thumbnail=data.get("thumbnail")
        )
        created = await self.design_repository.create(design)
        logger.info(f"Design {created.id} created by {owner_id}")
        return created

    async def update_design(
        self,
        design_id: uuid.UUID,
        owner_id: uuid.UUID,
        data: Dict[str, Any]
    ) -> Design:
        """Частичное обновление дизайна владельца"""
        design = await self.design_repository.update_owned(design_id, owner_id, data)
        if design is None:
            raise DesignNotFound()
        return design

    async def delete_design(self, design_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        """Удаление дизайна владельца"""
        if not await self.design_repository.delete_owned(design_id, owner_id):
            raise DesignNotFound()
        logger.info(f"Design {design_id} deleted by {owner_id}")


def parse_design_id(value: str) -> uuid.UUID:
    """Некорректный id обрабатывается как отсутствующий дизайн"""
    try:
        return uuid.UUID(value)
    except (TypeError, ValueError):
        raise DesignNotFound()
