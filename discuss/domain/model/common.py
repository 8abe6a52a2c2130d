"""Base model for all discussion entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are snapshots of server state and are never mutated in place;
    changes produce new instances via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
