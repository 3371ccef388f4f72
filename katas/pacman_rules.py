"""Rules of the Pac-Man game."""

__all__ = ["can_eat_ghost", "scored", "lost", "won"]


def can_eat_ghost(power_pellet_active: bool, touching_ghost: bool) -> bool:
    """Return True if Pac-Man has a power pellet active and is touching a ghost."""
    return power_pellet_active and touching_ghost


def scored(touching_power_pellet: bool, touching_dot: bool) -> bool:
    """Return True if Pac-Man is touching a power pellet or a dot."""
    return touching_power_pellet or touching_dot


def lost(power_pellet_active: bool, touching_ghost: bool) -> bool:
    """Return True if Pac-Man touches a ghost without a power pellet active."""
    return touching_ghost and not power_pellet_active


def won(has_eaten_all_dots: bool, power_pellet_active: bool, touching_ghost: bool) -> bool:
    """Return True if Pac-Man has eaten every dot and has not lost."""
    return has_eaten_all_dots and not lost(power_pellet_active, touching_ghost)