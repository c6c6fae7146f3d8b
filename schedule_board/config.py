"""Static configuration: the owner table and runtime settings."""

from __future__ import annotations

import os

from schedule_board.domain.models import Owner

OWNERS: tuple[Owner, ...] = (
    Owner(name="John Smith", color="#FFB3BA"),
    Owner(name="Jane Doe", color="#BAFFC9"),
    Owner(name="Mike Johnson", color="#BAE1FF"),
    Owner(name="Sarah Wilson", color="#FFFFBA"),
)

LOG_LEVEL = os.environ.get("SCHEDULE_BOARD_LOG_LEVEL", "INFO").upper()


def owner_color(name: str) -> str | None:
    for owner in OWNERS:
        if owner.name == name:
            return owner.color
    return None


def is_known_owner(name: str) -> bool:
    return any(owner.name == name for owner in OWNERS)
