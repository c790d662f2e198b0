"""Rules configuration for post-raid reconciliation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_bool, env_float, env_list
from .errors import ConfigurationError

DEFAULT_SCAV_EXTRACT_STANDING_GAIN: Final[float] = 0.01
DEFAULT_INSURANCE_RUN_INTERVAL_SECONDS: Final[float] = 600.0
DEFAULT_KEPT_SLOTS_ON_DEATH: Final[tuple[str, ...]] = ("SecuredContainer", "Pockets", "Scabbard")


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationConfig:
    """Values fixed for the lifetime of a ``ReconciliationEngine``."""

    save_loot_on_exit: bool = True
    remove_quest_items_on_death: bool = True
    scav_extract_standing_gain: float = DEFAULT_SCAV_EXTRACT_STANDING_GAIN
    insurance_run_interval_seconds: float = DEFAULT_INSURANCE_RUN_INTERVAL_SECONDS
    kept_slots_on_death: tuple[str, ...] = DEFAULT_KEPT_SLOTS_ON_DEATH

    def __post_init__(self) -> None:
        if self.insurance_run_interval_seconds < 0:
            raise ConfigurationError("insurance_run_interval_seconds must be non-negative")


def get_reconciliation_config() -> ReconciliationConfig:
    return ReconciliationConfig(
        save_loot_on_exit=env_bool("POSTRAID_SAVE_LOOT_ON_EXIT", default=True),
        remove_quest_items_on_death=env_bool(
            "POSTRAID_REMOVE_QUEST_ITEMS_ON_DEATH", default=True
        ),
        scav_extract_standing_gain=env_float(
            "POSTRAID_SCAV_EXTRACT_STANDING_GAIN", DEFAULT_SCAV_EXTRACT_STANDING_GAIN
        ),
        insurance_run_interval_seconds=env_float(
            "POSTRAID_INSURANCE_RUN_INTERVAL_SECONDS", DEFAULT_INSURANCE_RUN_INTERVAL_SECONDS
        ),
        kept_slots_on_death=env_list("POSTRAID_KEPT_SLOTS_ON_DEATH", DEFAULT_KEPT_SLOTS_ON_DEATH),
    )
