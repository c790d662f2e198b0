from __future__ import annotations

import pytest

from postraid.domain.model import ExitState, Trader, TraderInfo, Victim
from postraid.domain.reconciliation import (
    MAX_STANDING,
    MIN_STANDING,
    ScavKarmaProcessor,
    clamp_standing,
)
from tests.helpers.fakes import ConstantStandingDelta, FixedLoyaltyLeveling
from tests.helpers.profiles import make_combatant

SCAV_VICTIM = Victim(name="Scav", side="Savage", role="assault")


def test_clamp_standing_bounds() -> None:
    assert clamp_standing(-20.0) == MIN_STANDING
    assert clamp_standing(42.0) == MAX_STANDING
    assert clamp_standing(0.5) == 0.5


def test_survived_extract_adds_configured_gain() -> None:
    combatant = make_combatant()
    combatant.traders_info[Trader.FENCE] = TraderInfo(standing=1.0, loyalty_level=1)
    leveling = FixedLoyaltyLeveling(level=1)
    processor = ScavKarmaProcessor(ConstantStandingDelta(), leveling, extract_standing_gain=0.05)

    standing = processor.adjust_standing(combatant, [], ExitState.SURVIVED)

    assert standing == pytest.approx(1.05)
    assert leveling.calls == [Trader.FENCE]


def test_death_applies_curve_without_gain() -> None:
    combatant = make_combatant()
    combatant.traders_info[Trader.FENCE] = TraderInfo(standing=1.0)
    processor = ScavKarmaProcessor(ConstantStandingDelta(-0.25), FixedLoyaltyLeveling())

    standing = processor.adjust_standing(combatant, [SCAV_VICTIM, SCAV_VICTIM], ExitState.KILLED)

    assert standing == pytest.approx(0.5)


def test_standing_is_clamped_after_gain() -> None:
    combatant = make_combatant()
    combatant.traders_info[Trader.FENCE] = TraderInfo(standing=MAX_STANDING)
    processor = ScavKarmaProcessor(ConstantStandingDelta(), FixedLoyaltyLeveling())

    standing = processor.adjust_standing(combatant, [], ExitState.SURVIVED)

    assert standing == MAX_STANDING


def test_loyalty_level_never_drops_below_one() -> None:
    combatant = make_combatant()
    combatant.traders_info[Trader.FENCE] = TraderInfo(standing=-6.9, loyalty_level=1)
    processor = ScavKarmaProcessor(ConstantStandingDelta(-1.0), FixedLoyaltyLeveling(level=0))

    standing = processor.adjust_standing(combatant, [SCAV_VICTIM], ExitState.KILLED)

    assert standing == MIN_STANDING
    assert combatant.traders_info[Trader.FENCE].loyalty_level == 1


def test_missing_trader_record_starts_neutral() -> None:
    combatant = make_combatant()
    processor = ScavKarmaProcessor(ConstantStandingDelta(), FixedLoyaltyLeveling(level=2))

    standing = processor.adjust_standing(combatant, [], ExitState.RUNNER)

    assert standing == 0.0
    assert combatant.traders_info[Trader.FENCE].loyalty_level == 2
