from __future__ import annotations
from dataclasses import dataclass

from .base_types import InvalidInput, check_positive_int, is_power_of_two


@dataclass
class PMFConfig:

    precision: int = 16
    coarseness: int = 256

    def __post_init__(self):
        self.precision = check_positive_int(self.precision, "precision")
        self.coarseness = check_positive_int(self.coarseness, "coarseness")
        if not is_power_of_two(self.coarseness):
            raise InvalidInput(f"coarseness must be a power of two, got {self.coarseness}")
