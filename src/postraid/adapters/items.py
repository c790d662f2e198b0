"""Item identifier rewriting for reported inventories."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from postraid.domain.model import InsuredItem, Item, ReportedProfile


def new_item_id() -> str:
    return uuid4().hex[:24]


class FreshItemIdRewriter:
    """Give reported items server-issued ids.

    Insured items and the container roots keep their ids, so insurance records and
    the inventory skeleton stay linked. Parent links follow the rewrite.
    """

    def __init__(self, id_factory: Callable[[], str] = new_item_id) -> None:
        self._id_factory = id_factory

    def __call__(
        self,
        reported_profile: ReportedProfile,
        items: Sequence[Item],
        insured_items: Sequence[InsuredItem],
        fast_panel: Mapping[str, str],
    ) -> list[Item]:
        _ = fast_panel
        preserved = {insured.item_id for insured in insured_items}
        preserved.update(
            root
            for root in (reported_profile.equipment_id, reported_profile.quest_raid_items_id)
            if root is not None
        )

        new_ids: dict[str, str] = {}
        for item in items:
            if item.id in preserved or item.id in new_ids:
                continue
            new_ids[item.id] = self._id_factory()

        return [
            replace(
                item,
                id=new_ids.get(item.id, item.id),
                parent_id=new_ids.get(item.parent_id, item.parent_id)
                if item.parent_id is not None
                else None,
            )
            for item in items
        ]
