"""Shared logging helpers for postraid."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once.

    Reconciliation diagnostics (quest mismatches, counter overwrites) are logged at
    WARNING, standing changes at DEBUG. Pass ``force=True`` to reconfigure from tests
    or from the CLI's ``--verbose`` flag.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
