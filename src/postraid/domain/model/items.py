"""Item instances and the inventory tree that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True, slots=True, kw_only=True)
class Item:
    """One item instance; ``parent_id`` links it into the inventory tree."""

    id: str
    template_id: str
    parent_id: str | None = None
    slot_id: str | None = None
    found_in_raid: bool = False
    stack_count: int = 1

    def without_found_in_raid(self) -> Item:
        if not self.found_in_raid:
            return self
        return replace(self, found_in_raid=False)


@dataclass(frozen=True, slots=True)
class InsuredItem:
    trader_id: str
    item_id: str


def collect_subtree(items: Iterable[Item], root_id: str) -> list[Item]:
    """Return ``root_id`` and all of its descendants, in inventory order."""

    ordered = list(items)
    children: dict[str, list[str]] = {}
    for item in ordered:
        if item.parent_id is not None:
            children.setdefault(item.parent_id, []).append(item.id)

    wanted: set[str] = set()
    pending = [root_id]
    while pending:
        current = pending.pop()
        if current in wanted:
            continue
        wanted.add(current)
        pending.extend(children.get(current, ()))

    return [item for item in ordered if item.id in wanted]


@dataclass(kw_only=True)
class Inventory:
    """Ordered item list plus the ids of the well-known container roots."""

    items: list[Item] = field(default_factory=list["Item"])
    equipment_id: str | None = None
    stash_id: str | None = None
    quest_raid_items_id: str | None = None
    quest_stash_items_id: str | None = None
    sorting_table_id: str | None = None
    fast_panel: dict[str, str] = field(default_factory=dict[str, str])

    def get(self, item_id: str) -> Item | None:
        return next((item for item in self.items if item.id == item_id), None)

    def subtree(self, root_id: str | None) -> list[Item]:
        if root_id is None:
            return []
        return collect_subtree(self.items, root_id)

    def equipment(self) -> list[Item]:
        return self.subtree(self.equipment_id)

    def remove_subtree(self, root_id: str | None) -> list[Item]:
        """Remove ``root_id`` and its descendants, returning what was removed."""

        removed = self.subtree(root_id)
        if removed:
            removed_ids = {item.id for item in removed}
            self.items = [item for item in self.items if item.id not in removed_ids]
        return removed

    def replace_raid_containers(
        self,
        reported_items: Sequence[Item],
        *,
        fast_panel: dict[str, str],
    ) -> None:
        """Drop equipment, quest-raid and sorting-table trees, then take the reported items.

        Reported items are placed ahead of whatever is left (stash contents), and an
        id present in both keeps the reported version.
        """

        for root_id in (self.equipment_id, self.quest_raid_items_id, self.sorting_table_id):
            self.remove_subtree(root_id)

        reported_ids = {item.id for item in reported_items}
        remaining = [item for item in self.items if item.id not in reported_ids]
        self.items = [*reported_items, *remaining]
        self.fast_panel = dict(fast_panel)
