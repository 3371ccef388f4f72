"""Humans holding artifacts and wielding shared powers."""

from __future__ import annotations

from dataclasses import dataclass, field
from weakref import WeakSet

__all__ = [
    "Artifact",
    "Power",
    "Human",
    "give_new_artifact",
    "exchange_artifacts",
    "manifest_power",
    "use_power",
    "power_intensity",
]


@dataclass
class Artifact:
    """A named object a human can possess."""

    name: str


@dataclass(eq=False)
class Power:
    """A magical effect; identity matters, so powers compare by identity."""

    effect: str
    _bearers: WeakSet = field(default_factory=WeakSet, repr=False)


@dataclass(eq=False)
class Human:
    """A human with an optional artifact, own power and the power influencing them."""

    possession: Artifact | None = None
    own_power: Power | None = None
    influenced_by: Power | None = None


def give_new_artifact(human: Human, name: str) -> None:
    """Give ``human`` a new artifact called ``name``, replacing any previous one."""
    human.possession = Artifact(name)


def exchange_artifacts(first: Human, second: Human) -> None:
    """Swap the possessions of two humans."""
    first.possession, second.possession = second.possession, first.possession


def manifest_power(human: Human, effect: str) -> None:
    """Give ``human`` a new power with the given effect."""
    power = Power(effect)
    power._bearers.add(human)
    human.own_power = power


def use_power(caster: Human, target: Human) -> None:
    """Put ``target`` under the influence of the caster's own power."""
    power = caster.own_power
    target.influenced_by = power
    if power is not None:
        power._bearers.add(target)


def power_intensity(human: Human) -> int:
    """Return how many living humans hold the human's own power, 0 if there is none."""
    power = human.own_power
    if power is None:
        return 0
    return sum(
        (bearer.own_power is power) + (bearer.influenced_by is power)
        for bearer in list(power._bearers)
    )