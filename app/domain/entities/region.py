"""Region entity — grouping used to filter offices."""

from dataclasses import dataclass


@dataclass
class Region:
    id: str
    name: str
