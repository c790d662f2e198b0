from __future__ import annotations

import pytest

from postraid.adapters.catalogs import (
    DEFAULT_FENCE_LOYALTY_LEVELS,
    FindItemRequirement,
    KillStandingTable,
    QuestDefinition,
    StandingLoyaltyLevels,
    StaticMapCatalog,
    StaticQuestCatalog,
)
from postraid.domain.model import FindItemCondition, Trader, TraderInfo, Victim
from postraid.domain.ports import MapCatalog, QuestCatalog, StandingCurve, TraderLeveling
from tests.helpers.profiles import make_combatant


def test_map_catalog_lookup_is_case_insensitive() -> None:
    catalog = StaticMapCatalog()

    customs = catalog.get("BigMap")
    lab = catalog.get("laboratory")

    assert isinstance(catalog, MapCatalog)
    assert customs is not None
    assert customs.name == "Customs"
    assert customs.insurance_enabled
    assert lab is not None
    assert not lab.insurance_enabled
    assert catalog.get("atlantis") is None


def test_quest_catalog_only_matches_active_quests() -> None:
    catalog = StaticQuestCatalog(
        [
            QuestDefinition("q1", (FindItemRequirement("c-flash", frozenset({"tpl-flash"})),)),
            QuestDefinition("q2", (FindItemRequirement("c-folder", frozenset({"tpl-folder"})),)),
        ]
    )

    assert isinstance(catalog, QuestCatalog)
    assert len(catalog) == 2
    assert catalog.find_item_condition("tpl-flash", {"q1", "q2"}) == FindItemCondition(
        "q1", "c-flash"
    )
    assert catalog.find_item_condition("tpl-folder", {"q1"}) is None
    assert catalog.find_item_condition("tpl-unknown", {"q1", "q2"}) is None


def test_kill_standing_table_keys_savage_by_role() -> None:
    curve = KillStandingTable()
    victims = [
        Victim(name="scav", side="Savage", role="assault"),
        Victim(name="bear", side="Bear", role="sptBear"),
        Victim(name="boss", side="Savage", role="bossKilla"),
    ]

    assert isinstance(curve, StandingCurve)
    assert curve(1.0, victims) == pytest.approx(1.0 - 0.02 + 0.01)
    assert curve(1.0, []) == 1.0


def test_loyalty_levels_follow_standing() -> None:
    leveling = StandingLoyaltyLevels({Trader.FENCE: DEFAULT_FENCE_LOYALTY_LEVELS})
    profile = make_combatant()
    profile.traders_info[Trader.FENCE] = TraderInfo(standing=6.5, loyalty_level=1)

    leveling.recompute_loyalty_level(Trader.FENCE, profile)
    assert profile.traders_info[Trader.FENCE].loyalty_level == 2

    profile.traders_info[Trader.FENCE].standing = 0.0
    leveling.recompute_loyalty_level(Trader.FENCE, profile)
    assert profile.traders_info[Trader.FENCE].loyalty_level == 1
    assert isinstance(leveling, TraderLeveling)


def test_loyalty_levels_ignore_unknown_traders() -> None:
    leveling = StandingLoyaltyLevels({})
    profile = make_combatant()

    leveling.recompute_loyalty_level("prapor", profile)

    assert "prapor" not in profile.traders_info
