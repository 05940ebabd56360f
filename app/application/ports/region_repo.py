"""Port interface for region lookup."""

from abc import ABC, abstractmethod

from app.domain.entities.region import Region


class RegionRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Region]:
        ...
