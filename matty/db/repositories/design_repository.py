from typing import Any, Dict, List, Optional, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_
import uuid

from matty.db.base import utcnow
from matty.db.models.design import Design as DesignModel

if TYPE_CHECKING:
    from matty.domains.designs.entities import Design


# Поля, которые может менять владелец; id и owner_id неизменяемы
UPDATABLE_FIELDS = ("title", "canvas_data", "thumbnail")


class DesignRepository:
    """Репозиторий для работы с дизайнами.

    Каждый метод принимает идентификатор владельца: запросов только по id нет.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, design: "Design") -> "Design":
        """Создание нового дизайна"""
        db_design = DesignModel(
            id=design.id,
            owner_id=design.owner_id,
            title=design.title,
            canvas_data=design.canvas_data,
            thumbnail=design.thumbnail,
            created_at=design.created_at,
            updated_at=design.updated_at
        )

        self.session.add(db_design)
        await self.session.commit()
        await self.session.refresh(db_design)
        return self._to_domain(db_design)

    async def list_by_owner(self, owner_id: uuid.UUID) -> List["Design"]:
        """Дизайны владельца, новые первыми"""
        result = await self.session.execute(
            select(DesignModel)
            .where(DesignModel.owner_id == owner_id)
            .order_by(DesignModel.created_at.desc(), DesignModel.id.desc())
        )
        db_designs = result.scalars().all()
        return [self._to_domain(design) for design in db_designs]

    async def get_owned(self, design_id: uuid.UUID, owner_id: uuid.UUID) -> Optional["Design"]:
        """Получение дизайна по id в пределах владельца"""
        result = await self.session.execute(
            select(DesignModel).where(self._owned(design_id, owner_id))
        )
        db_design = result.scalar_one_or_none()
        return self._to_domain(db_design) if db_design else None

    async def update_owned(
        self,
        design_id: uuid.UUID,
        owner_id: uuid.UUID,
        changes: Dict[str, Any]
    ) -> Optional["Design"]:
        """Обновление дизайна владельца; None если не найден"""
        values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        values["updated_at"] = utcnow()

        stmt = (
            update(DesignModel)
            .where(self._owned(design_id, owner_id))
            .values(**values)
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None

        return await self.get_owned(design_id, owner_id)

    async def delete_owned(self, design_id: uuid.UUID, owner_id: uuid.UUID) -> bool:
        """Удаление дизайна владельца"""
        stmt = delete(DesignModel).where(self._owned(design_id, owner_id))
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _owned(self, design_id: uuid.UUID, owner_id: uuid.UUID):
        return and_(DesignModel.id == design_id, DesignModel.owner_id == owner_id)

    def _to_domain(self, db_design: DesignModel) -> "Design":
        """Преобразование модели БД в доменную сущность"""
        from matty.domains.designs.entities import Design

        return Design(
            id=db_design.id,
            owner_id=db_design.owner_id,
            title=db_design.title,
            canvas_data=db_design.canvas_data,
            thumbnail=db_design.thumbnail,
            created_at=db_design.created_at,
            updated_at=db_design.updated_at
        )
