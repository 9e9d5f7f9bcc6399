from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from .config import SAMPLE_COUNT, SAMPLE_RATE
from .curves import Curve, sample_sine
from .errors import InvalidParameterError

_LOGGER = logging.getLogger("harmonics.partials")


class Partial(BaseModel):
    """One harmonic component: a frequency, an amplitude and its sampled curve.

    ``data`` always equals ``sample_sine(frequency, amplitude, SAMPLE_COUNT,
    SAMPLE_RATE)``; build and update partials through the functions below so the
    curve never goes stale.
    """

    frequency: float = Field(gt=0)
    amplitude: float
    data: Curve

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )


def _resample(frequency: float, amplitude: float) -> Partial:
    data = sample_sine(frequency, amplitude, SAMPLE_COUNT, SAMPLE_RATE)
    return Partial(frequency=frequency, amplitude=amplitude, data=data)


def make_partial(fundamental_frequency: float, harmonic: int) -> Partial:
    """Build harmonic ``harmonic`` (1-based); only the fundamental sounds by default."""
    if harmonic < 1:
        raise InvalidParameterError(f"harmonic numbers start at 1, got {harmonic}")
    amplitude = 1.0 if harmonic == 1 else 0.0
    return _resample(fundamental_frequency * harmonic, amplitude)


def set_amplitude(partial: Partial, amplitude: float) -> Partial:
    return _resample(partial.frequency, amplitude)


def set_frequency(partial: Partial, frequency: float) -> Partial:
    return _resample(frequency, partial.amplitude)


def set_amplitudes(partials: Sequence[Partial], amplitudes: Sequence[float]) -> tuple[Partial, ...]:
    """Replace every amplitude at once, keeping each partial's frequency."""
    if len(amplitudes) != len(partials):
        raise InvalidParameterError(
            f"expected {len(partials)} amplitudes, got {len(amplitudes)}"
        )
    return tuple(
        set_amplitude(partial, amplitude) for partial, amplitude in zip(partials, amplitudes)
    )


def retune_all(partials: Sequence[Partial], fundamental_frequency: float) -> tuple[Partial, ...]:
    """Move every partial to its harmonic of ``fundamental_frequency``, keeping amplitudes."""
    _LOGGER.debug("Retuning %d partials to %.3f Hz", len(partials), fundamental_frequency)
    return tuple(
        set_frequency(partial, fundamental_frequency * (index + 1))
        for index, partial in enumerate(partials)
    )
