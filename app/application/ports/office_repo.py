"""Port interface for office persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.office import Office


class OfficeRepository(ABC):
    @abstractmethod
    async def save(self, office: Office) -> Office:
        """Insert a new office; assigns an id when the office has none."""
        ...

    @abstractmethod
    async def get_by_id(self, office_id: str) -> Office | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Office]:
        ...

    @abstractmethod
    async def update(self, office: Office) -> Office:
        ...

    @abstractmethod
    async def delete(self, office_id: str) -> Office | None:
        """Remove an office, returning it, or None when it does not exist."""
        ...
