"""Port interface for read-only catalogs served verbatim (clients, activities)."""

from abc import ABC, abstractmethod


class CatalogPort(ABC):
    @abstractmethod
    def load(self, name: str) -> list:
        """Return all records of the named catalog, [] when it does not exist."""
        ...
