from __future__ import annotations

from dataclasses import dataclass

NOT_FOUND = -1


class PMFError(Exception):
    pass


class InvalidInput(PMFError, ValueError):
    """Malformed construction input."""


class OutOfRange(PMFError, IndexError):
    """Query argument outside its documented bound."""


@dataclass(frozen=True)
class BuildStats:
    mass_points: int = 0
    coarseness: int = 0
    precision: int = 0
    total_mass: float = 0.0
    leaves: int = 0
    empty_rods: int = 0

    @property
    def compaction(self) -> float:
        if not self.coarseness:
            return 1.0
        return self.leaves / self.coarseness


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _is_integer(value) -> bool:
    return not isinstance(value, bool) and hasattr(value, "__index__")


def check_positive_int(value, name: str) -> int:
    if not _is_integer(value):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    value = value.__index__()
    if value <= 0:
        raise InvalidInput(f"{name} must be positive, got {value}")
    return value


def check_index(value, bound: int, name: str) -> int:
    if not _is_integer(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    value = value.__index__()
    if not 0 <= value < bound:
        raise OutOfRange(f"{name} {value} outside [0, {bound})")
    return value
