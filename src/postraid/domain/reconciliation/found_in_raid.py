"""Found-in-raid tagging of reported items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from postraid.domain.model import ExitState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from postraid.domain.model import Item


def tag_found_in_raid(items: Iterable[Item], exit_state: ExitState) -> list[Item]:
    """Return the items with found-in-raid kept only when the raid was survived.

    Items arrive with whatever flag the client set; anything other than a clean
    ``Survived`` extract strips it. The input is left untouched.
    """

    if exit_state is ExitState.SURVIVED:
        return list(items)
    return [item.without_found_in_raid() for item in items]
