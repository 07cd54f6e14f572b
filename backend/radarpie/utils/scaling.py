"""Proportional scaler — weights to magnitudes under a floor and a total budget.

Used for ring thickness (radius budget) and sub-slice shares (360°).
No engine imports.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def scale_proportional(weights: Sequence[float], total: float, minimum: float) -> list[float]:
    """Split ``total`` proportionally to ``weights`` with every output >= ``minimum``.

    Items whose share falls below the floor are clamped to it and removed from
    the pool; the shrunken budget is re-split among the rest. Clamping can push
    other shares under the floor, so this repeats until nothing new is clamped.
    Each round clamps at least one item, so it ends within ``len(weights)`` rounds.

    If ``minimum * len(weights) > total`` every item gets ``minimum`` and the
    budget is exceeded.
    """
    w = np.asarray(weights, dtype=np.float64)
    n = len(w)
    if n == 0:
        return []
    if np.any(w < 0) or not np.all(np.isfinite(w)):
        raise ValueError(f"Weights must be finite and non-negative: {list(weights)}")
    if minimum < 0 or total < 0:
        raise ValueError(f"total and minimum must be non-negative (total={total}, minimum={minimum})")

    out = np.full(n, float(minimum))
    if minimum * n > total:
        logger.warning(
            "Budget overflow: %d items x minimum %.3f > total %.3f; flooring all items",
            n,
            minimum,
            total,
        )
        return out.tolist()

    pool = np.ones(n, dtype=bool)
    budget = float(total)

    for _ in range(n):
        pool_weight = float(np.sum(w[pool]))
        if pool_weight > 0:
            shares = w * budget / pool_weight
        else:
            # Only zero weights left: nothing to be proportional to
            shares = np.full(n, budget / int(np.sum(pool)))

        below = pool & (shares < minimum)
        if not below.any():
            out[pool] = shares[pool]
            break

        pool &= ~below
        budget -= minimum * int(np.sum(below))
        if not pool.any():
            break

    return out.tolist()
