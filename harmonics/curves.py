"""
Curve primitives for the harmonics visualizer.

1. Sampler: one sine segment per partial, rendered at a fixed rate.
2. Combiner: pointwise sum of partial curves, scaled by the master gain.

Both return read-only arrays so that published state snapshots cannot be
modified in place.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidParameterError

Curve = NDArray[np.float64]
CurveLike = NDArray[np.floating[Any]] | Sequence[float]


def _freeze(curve: Curve) -> Curve:
    curve.flags.writeable = False
    return curve


def check_sampling(frequency: float, sample_count: int, sample_rate: float) -> None:
    """Raise InvalidParameterError unless ``sample_sine`` can render these inputs finitely."""
    if not frequency > 0 or math.isinf(frequency):
        raise InvalidParameterError(f"frequency must be positive, got {frequency!r}")
    if not sample_rate > 0 or math.isinf(sample_rate):
        raise InvalidParameterError(f"sample_rate must be positive, got {sample_rate!r}")
    if isinstance(sample_count, bool) or not isinstance(sample_count, int) or sample_count <= 0:
        raise InvalidParameterError(f"sample_count must be a positive int, got {sample_count!r}")
    # Largest intermediate of the phase, before the division by the rate.
    if not math.isfinite(2 * math.pi * frequency * (sample_count - 1)):
        raise InvalidParameterError(f"frequency {frequency!r} overflows the sample phase")


def sample_sine(
    frequency: float,
    amplitude: float,
    sample_count: int,
    sample_rate: float,
) -> Curve:
    """Render ``sample_count`` samples of ``amplitude * sin(2*pi*frequency*t)``.

    The window is ``sample_count / sample_rate`` seconds long and is not
    aligned to a period of the wave.
    """
    check_sampling(frequency, sample_count, sample_rate)

    index = np.arange(sample_count, dtype=np.float64)
    return _freeze(amplitude * np.sin(2 * np.pi * frequency * index / sample_rate))


def combine_curves(curves: Iterable[CurveLike], gain: float) -> Curve:
    """Sum curves pointwise in order and scale the result by ``gain``.

    There is no normalization by curve count, so the result may leave [-1, 1].
    """
    arrays = [np.asarray(curve, dtype=np.float64).reshape(-1) for curve in curves]
    if not arrays:
        return _freeze(np.zeros(0, dtype=np.float64))

    length = arrays[0].size
    mismatched = [array.size for array in arrays if array.size != length]
    if mismatched:
        raise InvalidParameterError(
            f"curves must share one length, got {length} and {sorted(set(mismatched))}"
        )

    total = np.zeros(length, dtype=np.float64)
    for array in arrays:
        total = total + array
    return _freeze(gain * total)
