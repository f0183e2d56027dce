from __future__ import annotations
import abc
import logging
from typing import Sequence, Tuple

import numpy as np

from .algorithm import CoarsenessSampler, RodAllocator
from .base_types import NOT_FOUND, BuildStats, check_index
from .config import PMFConfig
from .tree import CompactTree

_LOG = logging.getLogger(__name__)


class ProbabilityMassFunction(abc.ABC):
    """
    Maps between the two index spaces of an indeterminate position:
    coarseness points (where in the granule) and rods (how much mass
    lies to the left).

    • get_precision(i)    —— rod holding coarseness point i
    • get_coarseness(r)   —— rightmost coarseness point of rod r, or NOT_FOUND
    """

    def __init__(self, precision: int, coarseness: int) -> None:
        cfg = PMFConfig(precision=precision, coarseness=coarseness)
        self._precision = cfg.precision
        self._coarseness = cfg.coarseness

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def coarseness(self) -> int:
        return self._coarseness

    @abc.abstractmethod
    def get_precision(self, coarseness_index: int) -> int: ...

    @abc.abstractmethod
    def get_coarseness(self, partial_mass: int) -> int: ...

    def precisions(self) -> np.ndarray:
        return np.fromiter(
            (self.get_precision(i) for i in range(self.coarseness)),
            dtype=np.int64, count=self.coarseness,
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(precision={self.precision}, "
                f"coarseness={self.coarseness})")


class ConcretePMF(ProbabilityMassFunction):

    def __init__(self, precision: int, coarseness: int,
                 mass_function: Sequence[float]) -> None:
        super().__init__(precision, coarseness)

        samples, total = CoarsenessSampler.sample(mass_function, self.coarseness)
        rods = RodAllocator.allocate(samples, total, self.precision)
        self._tree = CompactTree(rods, self.coarseness)
        self._rods: Tuple[int, ...] = tuple(rods)

        self._stats = BuildStats(
            mass_points=len(mass_function),
            coarseness=self.coarseness,
            precision=self.precision,
            total_mass=total,
            leaves=self._tree.leaf_count,
            empty_rods=self._rods.count(0),
        )
        _LOG.info("PMF built (precision=%d, coarseness=%d, leaves=%d)",
                  self.precision, self.coarseness, self._stats.leaves)

    @classmethod
    def from_config(cls, cfg: PMFConfig, mass_function: Sequence[float]) -> "ConcretePMF":
        return cls(cfg.precision, cfg.coarseness, mass_function)

    @property
    def stats(self) -> BuildStats:
        return self._stats

    @property
    def rod_counts(self) -> Tuple[int, ...]:
        return self._rods

    def get_precision(self, coarseness_index: int) -> int:
        return self._tree.get_left_rods(coarseness_index)

    def get_coarseness(self, partial_mass: int) -> int:
        return self._tree.search(partial_mass)


class UniformPMF(ProbabilityMassFunction):
    """Closed-form mapping for a uniformly distributed mass function."""

    @classmethod
    def from_config(cls, cfg: PMFConfig) -> "UniformPMF":
        return cls(cfg.precision, cfg.coarseness)

    def get_precision(self, coarseness_index: int) -> int:
        c = check_index(coarseness_index, self.coarseness, "coarseness index")
        return c * self.precision // self.coarseness

    def get_coarseness(self, partial_mass: int) -> int:
        r = check_index(partial_mass, self.precision, "partial mass")
        # ceil((r + 1) * C / P) - 1
        c = min(-(-(r + 1) * self.coarseness // self.precision) - 1, self.coarseness - 1)
        if c * self.precision // self.coarseness != r:
            return NOT_FOUND
        return c
