from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

import numpy as np

from .base_types import InvalidInput

_LOG = logging.getLogger(__name__)


class CoarsenessSampler:
    """
    • sample(mass_function, C)  —— C evenly spaced samples at i/(2C), i odd
    • midpoints(n)              —— midpoint of each of n cells over [0, 1)

    Each sample is read off the line through the two neighbouring mass
    points; first and last samples extrapolate from the edge window.
    """

    @staticmethod
    def midpoints(n: int) -> np.ndarray:
        return (2.0 * np.arange(n) + 1.0) / (2.0 * n)

    @staticmethod
    def sample(mass_function: Sequence[float], coarseness: int) -> Tuple[np.ndarray, float]:
        mf = np.asarray(mass_function, dtype=float)
        if mf.ndim != 1 or mf.size < 2:
            raise InvalidInput(f"mass function needs at least 2 points, got {mf.size}")
        if not np.all(np.isfinite(mf)) or (mf < 0).any():
            raise InvalidInput("mass function values must be finite and non-negative")
        if coarseness < 1:
            raise InvalidInput(f"coarseness must be positive, got {coarseness}")

        L = mf.size
        centers = CoarsenessSampler.midpoints(L)
        xs = CoarsenessSampler.midpoints(coarseness)

        # window [low, low+1): last mass midpoint at or before x, never past L-2
        low = np.clip(np.searchsorted(centers, xs, side="right") - 1, 0, L - 2)
        slope = (mf[low + 1] - mf[low]) * L
        samples = slope * (xs - centers[low]) + mf[low]

        total = float(samples.sum())
        _LOG.debug("Sampled %d mass points into %d samples (total=%.6g)",
                   L, coarseness, total)
        return samples, total


class RodAllocator:
    """
    Greedy split of the coarseness samples into `precision` contiguous rods,
    each closing as near as it can to its share of the cumulative mass.
    """

    @staticmethod
    def allocate(samples: Sequence[float], total_mass: float, precision: int) -> List[int]:
        if precision < 1:
            raise InvalidInput(f"precision must be positive, got {precision}")
        values = np.asarray(samples, dtype=float)
        n = values.size

        rods = [0] * precision
        running, pos = 0.0, 0
        for rod in range(precision - 1):
            target = (rod + 1) * total_mass / precision
            while pos < n:
                nxt = running + values[pos]
                if abs(nxt - target) >= abs(running - target):
                    break
                running = nxt
                pos += 1
                rods[rod] += 1
        rods[-1] += n - pos

        empty = rods.count(0)
        if empty:
            _LOG.warning("%d of %d rods received no samples", empty, precision)
        _LOG.debug("Allocated %d samples into rods %s", n, rods)
        return rods
