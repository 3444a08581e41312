from sqlalchemy import Column, String, JSON, Uuid, Index

from matty.db.base import BaseModel


class Design(BaseModel):
    __tablename__ = "designs"

    # Владелец - идентификатор из токена, внешнего ключа на users нет
    owner_id = Column(Uuid(as_uuid=True), nullable=False)
    title = Column(String(100), nullable=False)
    canvas_data = Column(JSON, nullable=False)
    thumbnail = Column(String, nullable=False, default="")


# Список дизайнов владельца, новые первыми
Index("ix_designs_owner_id_created_at", Design.owner_id, Design.created_at.desc())
