from __future__ import annotations

from dataclasses import dataclass
from typing import Final

LIGHTHOUSE_MAP_ID: Final[str] = "lighthouse"


@dataclass(frozen=True, slots=True)
class RaidMap:
    id: str
    name: str
    insurance_enabled: bool

    @property
    def is_lighthouse(self) -> bool:
        return self.id.lower() == LIGHTHOUSE_MAP_ID
