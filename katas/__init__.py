"""Small programming exercises: primes, number words, spirals, sublists, board checks and game rules."""

__version__ = "0.1.0"

__all__ = [
    "nth_prime",
    "prime_factors",
    "sieve",
    "reverse_string",
    "series",
    "say",
    "spiral_matrix",
    "sublist",
    "queen_attack",
    "robot_name",
    "power_of_troy",
    "speedywagon",
    "pacman_rules",
    "troll_the_trolls",
    "vehicle_purchase",
]