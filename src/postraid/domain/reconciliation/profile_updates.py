"""Copy raid results from the report onto a stored profile."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from postraid.domain.model import ActorProfile, Item, ReportedProfile


def merge_base_stats(profile: ActorProfile, reported: ReportedProfile) -> None:
    """Take level, experience, stats, skills and quest progress from the report.

    Reported values are deep-copied so the profile never aliases the report.
    """

    profile.info.level = reported.level
    profile.info.experience = reported.experience
    profile.stats = copy.deepcopy(reported.stats)
    profile.skills = dict(reported.skills)
    profile.encyclopedia = {**profile.encyclopedia, **reported.encyclopedia}
    profile.condition_counters = [copy.deepcopy(counter) for counter in reported.condition_counters]
    _merge_quests(profile, reported)


def _merge_quests(profile: ActorProfile, reported: ReportedProfile) -> None:
    for reported_quest in reported.quests:
        existing = profile.find_quest(reported_quest.quest_id)
        if existing is None:
            profile.quests.append(copy.deepcopy(reported_quest))
            continue
        existing.status = reported_quest.status
        existing.status_timers = dict(reported_quest.status_timers)
        existing.completed_conditions = list(reported_quest.completed_conditions)


def commit_inventory(
    profile: ActorProfile,
    items: Sequence[Item],
    *,
    fast_panel: dict[str, str],
) -> None:
    """Replace the raid containers with ``items``; insured items survive the swap."""

    insured = list(profile.insured_items)
    profile.inventory.replace_raid_containers(items, fast_panel=fast_panel)
    profile.insured_items = insured


def snapshot_pre_raid_gear(profile: ActorProfile) -> list[Item]:
    return list(profile.inventory.equipment())
