from __future__ import annotations

import pytest

from postraid.domain.model import (
    AccountProfiles,
    ActorKind,
    ActorProfile,
    Health,
    HealthValue,
)
from tests.helpers.profiles import make_health


def test_set_current_clamps_into_bounds() -> None:
    value = HealthValue(10.0, 35.0)

    value.set_current(50.0)
    assert value.current == 35.0

    value.set_current(-3.0)
    assert value.current == 0.0


def test_negative_maximum_is_rejected() -> None:
    with pytest.raises(ValueError, match="maximum"):
        HealthValue(0.0, -1.0)


def test_apply_snapshot_keeps_own_maxima() -> None:
    health = make_health(current=35.0, maximum=35.0)
    snapshot = Health(
        body_parts={"Head": HealthValue(50.0, 80.0), "Chest": HealthValue(12.0, 80.0)},
        hydration=HealthValue(10.0, 100.0),
    )

    health.apply_snapshot(snapshot)

    assert health.body_parts["Head"].current == 35.0
    assert health.body_parts["Chest"].current == 12.0
    assert health.body_parts["Chest"].maximum == 35.0
    assert health.hydration is not None
    assert health.hydration.current == 10.0
    assert health.is_within_bounds()


def test_restore_all_fills_vitals() -> None:
    health = make_health(current=1.0)

    health.restore_all()

    assert all(value.current == value.maximum for value in health.vitals())


def test_account_rejects_swapped_profiles() -> None:
    combatant = ActorProfile(id="a", kind=ActorKind.COMBATANT)
    scavenger = ActorProfile(id="b", kind=ActorKind.SCAVENGER)

    with pytest.raises(ValueError, match="combatant"):
        AccountProfiles(session_id="s", combatant=scavenger, scavenger=combatant)
