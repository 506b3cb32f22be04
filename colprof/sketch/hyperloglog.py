"""
HyperLogLog cardinality sketch for string columns.

Approximates the number of distinct values in constant memory: ``m = 2^p``
one-byte registers, where ``p`` is the smallest precision whose standard
error ``1.04 / sqrt(m)`` meets the requested relative error.

Each string is hashed to a 64-bit digest with datasketch's
``sha1_hash64``.  The low ``p`` bits pick a register; the remaining
``64 - p`` bits supply the rank (leading zeros + 1), and the register keeps
the largest rank it has seen.

Estimation follows Flajolet et al. (2007):

* raw estimate ``α_m · m² / Σ 2^(-M[j])``;
* linear counting ``m · ln(m / V)`` when the raw estimate is at most
  ``2.5 m`` and ``V`` registers are still zero;
* large-range correction ``-2^64 · ln(1 - E / 2^64)`` above ``2^64 / 30``,
  scaled to the digest width.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from datasketch.hashfunc import sha1_hash64

__all__ = ["CardinalitySketch", "precision_for_error", "MIN_PRECISION", "MAX_PRECISION"]

logger = logging.getLogger(__name__)

# Same precision bounds as datasketch.HyperLogLog.
MIN_PRECISION = 4
MAX_PRECISION = 16

_HASH_BITS = 64
_HASH_SPACE = float(2**_HASH_BITS)


def precision_for_error(relative_error: float) -> int:
    """Smallest ``p`` with ``1.04 / sqrt(2^p) <= relative_error``.

    Clamped to ``[MIN_PRECISION, MAX_PRECISION]``.

    >>> precision_for_error(0.1)
    7
    """
    if not 0.0 < relative_error < 1.0:
        raise ValueError(f"relative_error must be in (0, 1), got {relative_error!r}")
    p = math.ceil(math.log2((1.04 / relative_error) ** 2))
    clamped = min(max(p, MIN_PRECISION), MAX_PRECISION)
    if clamped < p:
        logger.warning(
            "relative_error %g needs precision %d; capped at %d (error ~%.4f)",
            relative_error, p, clamped, 1.04 / math.sqrt(2**clamped),
        )
    return clamped


def _alpha(m: int) -> float:
    if m == 16:
        return 0.673
    if m == 32:
        return 0.697
    if m == 64:
        return 0.709
    return 0.7213 / (1.0 + 1.079 / m)


class CardinalitySketch:
    """Single-stream HyperLogLog over UTF-8 strings.

    Parameters
    ----------
    relative_error : float
        Target relative standard error ε, e.g. ``0.1`` for ~10%.
    """

    def __init__(self, relative_error: float = 0.1) -> None:
        self.relative_error = relative_error
        self.p = precision_for_error(relative_error)
        self.m = 1 << self.p
        self._index_mask = self.m - 1
        self._rank_bits = _HASH_BITS - self.p
        self._alpha = _alpha(self.m)
        self.registers = np.zeros(self.m, dtype=np.uint8)

    def __len__(self) -> int:
        return self.m

    def __repr__(self) -> str:
        return f"CardinalitySketch(relative_error={self.relative_error!r}, p={self.p})"

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Zero every register in place."""
        self.registers.fill(0)

    def update(self, s: str) -> None:
        """Offer one string to the sketch."""
        self.update_bytes(s.encode("utf-8"))

    def update_bytes(self, data: bytes) -> None:
        """Offer raw bytes to the sketch."""
        digest = sha1_hash64(data)
        index = digest & self._index_mask
        w = digest >> self.p
        rank = self._rank_bits - w.bit_length() + 1
        if rank > self.registers[index]:
            self.registers[index] = rank

    # ------------------------------------------------------------------
    # Estimation
    # ------------------------------------------------------------------

    def cardinality(self) -> float:
        """Estimated number of distinct values offered so far."""
        m = self.m
        estimate = self._alpha * m * m / float(np.sum(np.exp2(-self.registers.astype(np.float64))))

        if estimate <= 2.5 * m:
            zeros = int(np.count_nonzero(self.registers == 0))
            if zeros > 0:
                return m * math.log(m / zeros)
            return estimate

        if estimate > _HASH_SPACE / 30.0:
            return -_HASH_SPACE * math.log(1.0 - estimate / _HASH_SPACE)

        return estimate

    def count(self) -> int:
        """:meth:`cardinality` rounded to the nearest integer."""
        return int(round(self.cardinality()))
