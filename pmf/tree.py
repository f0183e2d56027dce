"""
Compact left-rods tree
----------------------
A complete binary tree over `coarseness` leaves kept as flat arrays:
node k has children 2k+1 and 2k+2, leaves start at coarseness-1.
Sibling leaves carrying the same rod index are merged into their parent,
so long runs of one rod cost a single leaf.

• get_left_rods(i)  -> rod index of coarseness point i
• search(rod)       -> rightmost coarseness point of `rod`, or NOT_FOUND
"""

from __future__ import annotations
import logging
from typing import Sequence

import numpy as np
from bitarray import bitarray

from .base_types import (NOT_FOUND, InvalidInput, check_index,
                         check_positive_int, is_power_of_two)

_LOG = logging.getLogger(__name__)


class CompactTree:

    def __init__(self, rod_counts: Sequence[int], coarseness: int) -> None:
        coarseness = check_positive_int(coarseness, "coarseness")
        if not is_power_of_two(coarseness):
            raise InvalidInput(f"coarseness must be a power of two, got {coarseness}")
        counts = [int(c) for c in rod_counts]
        if not counts:
            raise InvalidInput("at least one rod is required")
        if min(counts) < 0 or sum(counts) != coarseness:
            raise InvalidInput(
                f"rod counts must be non-negative and sum to {coarseness}, got {counts}")

        self._coarseness = coarseness
        self._precision = len(counts)
        self._first_leaf = coarseness - 1

        size = 2 * coarseness - 1
        self._values = np.zeros(size, dtype=np.int64)
        self._is_leaf = bitarray(size)
        self._is_leaf.setall(0)
        self._is_leaf[self._first_leaf:] = 1

        self._fill(counts)
        self._prune()
        self._compact()

        _LOG.debug("Compact tree built (leaves=%d/%d, rods=%d)",
                   self.leaf_count, coarseness, self.precision)

    def __len__(self) -> int:
        return self._coarseness

    @property
    def coarseness(self) -> int:
        return self._coarseness

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def leaf_count(self) -> int:
        return int(self._leaves.size)

    @property
    def leaves(self) -> np.ndarray:
        view = self._leaves.view()
        view.flags.writeable = False
        return view

    def get_left_rods(self, coarseness_index: int) -> int:
        idx = check_index(coarseness_index, self.coarseness, "coarseness index")
        node = idx + self._first_leaf
        while not self._is_leaf[node]:
            node = (node - 1) // 2
        return int(self._leaves[self._index_map[node]])

    def search(self, rod: int) -> int:
        rod = check_index(rod, self.precision, "rod")
        pos = int(np.searchsorted(self._leaves, rod, side="right")) - 1
        if pos < 0 or self._leaves[pos] != rod:
            return NOT_FOUND
        return int(self._right_edge[pos])

    # ------------------------------------------------------------------ build

    def _fill(self, counts: Sequence[int]) -> None:
        node = self._first_leaf
        for rod, n in enumerate(counts):
            self._values[node:node + n] = rod
            node += n

    def _prune(self) -> None:
        # children always sit at higher indices than their parent, so a
        # reverse sweep resolves every subtree before the node above it
        for node in range(self._first_leaf - 1, -1, -1):
            left, right = 2 * node + 1, 2 * node + 2
            if (self._is_leaf[left] and self._is_leaf[right]
                    and self._values[left] == self._values[right]):
                self._values[node] = self._values[left]
                self._is_leaf[node] = 1
                self._is_leaf[left] = 0
                self._is_leaf[right] = 0

    def _edge(self, node: int, step: int) -> int:
        while node < self._first_leaf:
            node = 2 * node + step
        return node - self._first_leaf

    def _compact(self) -> None:
        nodes = list(self._is_leaf.search(bitarray("1")))
        nodes.sort(key=lambda k: self._edge(k, 1))

        self._leaves = self._values[nodes].copy()
        self._right_edge = np.asarray([self._edge(k, 2) for k in nodes], dtype=np.int64)
        self._index_map = np.full(self._values.size, -1, dtype=np.int64)
        self._index_map[nodes] = np.arange(len(nodes))
