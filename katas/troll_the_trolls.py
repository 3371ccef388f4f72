"""Forum permissions for trolls, guests, users and moderators."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "AccountStatus",
    "Action",
    "display_post",
    "permission_check",
    "valid_player_combination",
    "has_priority",
]


class AccountStatus(Enum):
    """Account types, in ascending order of priority."""

    TROLL = 0
    GUEST = 1
    USER = 2
    MOD = 3


class Action(Enum):
    """What an account may try to do with a post."""

    READ = "read"
    WRITE = "write"
    REMOVE = "remove"


_PERMISSIONS = {
    AccountStatus.GUEST: frozenset({Action.READ}),
    AccountStatus.TROLL: frozenset({Action.READ, Action.WRITE}),
    AccountStatus.USER: frozenset({Action.READ, Action.WRITE}),
    AccountStatus.MOD: frozenset(Action),
}

_PLAYERS = frozenset({AccountStatus.USER, AccountStatus.MOD})


def display_post(poster: AccountStatus, viewer: AccountStatus) -> bool:
    """Return True if the viewer may see the poster's posts; trolls are seen only by trolls."""
    return poster is not AccountStatus.TROLL or viewer is AccountStatus.TROLL


def permission_check(action: Action, status: AccountStatus) -> bool:
    """Return True if an account with ``status`` may perform ``action``."""
    return action in _PERMISSIONS[status]


def valid_player_combination(first: AccountStatus, second: AccountStatus) -> bool:
    """Return True if two players may join the same game."""
    if first is AccountStatus.TROLL and second is AccountStatus.TROLL:
        return True
    return first in _PLAYERS and second in _PLAYERS


def has_priority(first: AccountStatus, second: AccountStatus) -> bool:
    """Return True if ``first`` has strictly higher priority than ``second``."""
    return first.value > second.value