# katas

Small, self-contained programming exercises. Each one is a plain Python module
inside the `katas` package. Only the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `katas.nth_prime` | `nth(prime_index)` returns the n-th prime, counting from 1. `is_prime(num)` checks one number. |
| `katas.prime_factors` | `of(num)` returns the prime factors of a number in ascending order, with repetition. `of(1)` is `[]`. |
| `katas.sieve` | `primes(upper)` lists the primes from 2 up to and including `upper`. |
| `katas.reverse_string` | `reverse_string(text)` returns the text backwards. |
| `katas.series` | `slices(text, window)` returns every contiguous substring of length `window`, in order. |
| `katas.say` | `in_english(num)` spells out 0 to 999,999,999,999 in English words. |
| `katas.spiral_matrix` | `spiral_matrix(n)` builds an n×n list of lists holding 1 to n² in a clockwise spiral. `spiral_matrix(0)` is `[]`. |
| `katas.sublist` | `sublist(first, second)` returns a `ListComparison`: `EQUAL`, `SUBLIST`, `SUPERLIST` or `UNEQUAL`. |
| `katas.queen_attack` | `ChessBoard(white, black)` takes two `(row, column)` positions on an 8×8 board; `can_attack()` tells whether the queens share a row, column or diagonal. |
| `katas.robot_name` | `Robot` gets a name of two capital letters and three digits, such as `AB123`, read from its `name` property. `reset()` gives it a name it has not had before. An optional `random.Random` can be passed as `rng`. |
| `katas.power_of_troy` | `Human`, `Artifact` and `Power`, with `give_new_artifact`, `exchange_artifacts`, `manifest_power`, `use_power` and `power_intensity`. |
| `katas.speedywagon` | `PillarMenSensor` with `connection_check`, `activity_counter`, `alarm_control`, `uv_light_heuristic` and `uv_alarm`. |
| `katas.pacman_rules` | `can_eat_ghost`, `scored`, `lost`, `won` |
| `katas.troll_the_trolls` | `AccountStatus` and `Action` enums with `display_post`, `permission_check`, `valid_player_combination` and `has_priority`. |
| `katas.vehicle_purchase` | `needs_license`, `choose_vehicle`, `calculate_resell_price` |

## Examples

```python
from katas.nth_prime import nth
from katas.prime_factors import of
from katas.say import in_english
from katas.series import slices
from katas.spiral_matrix import spiral_matrix
from katas.sublist import sublist
from katas.queen_attack import ChessBoard

nth(6)                       # 13
of(901255)                   # [5, 17, 23, 461]
in_english(1234)             # 'one thousand two hundred thirty-four'
slices("9142", 2)            # ['91', '14', '42']
spiral_matrix(3)             # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
sublist([1, 2], [0, 1, 2])   # ListComparison.SUBLIST
ChessBoard((2, 2), (0, 4)).can_attack()   # True
```

Powers are shared between humans. `power_intensity` counts how many living
humans currently hold a human's own power, the owner included:

```python
from katas.power_of_troy import Human, manifest_power, use_power, power_intensity

victor, reed = Human(), Human()
manifest_power(victor, "technopathic super-genius")
use_power(victor, reed)
power_intensity(victor)      # 2
```

## Invalid input

Invalid input raises `ValueError`: `nth` below 1, `of` below 1, a number out of
range for `in_english`, a `slices` window that is not positive or longer than
the text, a negative size for `spiral_matrix`, and queens placed off the board
or on the same square. `Robot.reset()` raises `RuntimeError` once all 676,000
possible names have been used by that robot.

## What this package does not do

It is a library of functions and classes only. There is no command-line program
and nothing to run besides the test suite.