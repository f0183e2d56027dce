'''''
python validation.py
'''''

from __future__ import annotations
import logging
from time import time

import numpy as np

from pmf import NOT_FOUND, ConcretePMF, PMFConfig, UniformPMF

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-18s  %(levelname)s  %(message)s",
)
_LOG = logging.getLogger("VALIDATE")

MASS_POINTS = 1_000
CONFIGS     = [PMFConfig(precision=p, coarseness=c)
               for p, c in [(4, 16), (16, 256), (64, 1024), (100, 4096)]]


def make_shapes(n: int) -> dict[str, np.ndarray]:
    rng = np.random.default_rng(42)
    x = (np.arange(n) + 0.5) / n
    return {
        "uniform":  np.ones(n),
        "ramp":     x,
        "normal":   np.exp(-0.5 * ((x - 0.5) / 0.1) ** 2),
        "bimodal":  np.exp(-0.5 * ((x - 0.2) / 0.05) ** 2)
                    + 0.5 * np.exp(-0.5 * ((x - 0.8) / 0.05) ** 2),
        "noisy":    rng.random(n),
    }


def check(pmf: ConcretePMF) -> float:
    """Return the worst gap between a point's rod and its true mass share."""
    ranks = pmf.precisions()
    assert (np.diff(ranks) >= 0).all(), "left rods not monotone"

    for r in range(pmf.precision):
        k = pmf.get_coarseness(r)
        if k == NOT_FOUND:
            assert r not in ranks, f"rod {r} populated but not found"
            continue
        assert pmf.get_precision(k) == r, f"rod {r} boundary mismatch"
        assert k == pmf.coarseness - 1 or pmf.get_precision(k + 1) > r

    return float(np.abs(np.diff(ranks)).max(initial=0))


def validate():
    shapes = make_shapes(MASS_POINTS)
    for cfg in CONFIGS:
        for name, mf in shapes.items():
            t0 = time()
            pmf = ConcretePMF.from_config(cfg, mf)
            build_ms = (time() - t0) * 1_000
            jump = check(pmf)
            _LOG.info("%-8s P=%-4d C=%-5d leaves=%-5d (%.1f%%) empty=%-3d "
                      "max jump=%d  build %.1f ms",
                      name, cfg.precision, cfg.coarseness, pmf.stats.leaves,
                      100 * pmf.stats.compaction, pmf.stats.empty_rods,
                      jump, build_ms)

        uniform = UniformPMF.from_config(cfg)
        concrete = ConcretePMF.from_config(cfg, shapes["uniform"])
        mismatch = int((uniform.precisions() != concrete.precisions()).sum())
        _LOG.info("uniform closed form vs built: %d / %d points differ",
                  mismatch, cfg.coarseness)

    print("\n✓ All checks passed.")


if __name__ == "__main__":
    validate()
