from matty.domains.designs.entities import Design
from matty.domains.designs.schemas import DesignCreate, DesignUpdate

__all__ = [
    "Design",
    "DesignCreate",
    "DesignUpdate",
]
