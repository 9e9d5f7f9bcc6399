from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_FUNDAMENTAL_FREQUENCY, DEFAULT_MASTER_GAIN, HARMONICS_COUNT
from .curves import Curve, combine_curves
from .partials import Partial, make_partial


class AppState(BaseModel):
    """Immutable snapshot of the generator.

    ``partials[i]`` is harmonic ``i + 1``. ``total_curve`` is the combination of
    every partial's ``data`` scaled by ``master_gain``.
    """

    playing: bool
    master_gain: float
    fundamental_frequency: float
    partials: tuple[Partial, ...]
    total_curve: Curve

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )


def combine_partials(partials: tuple[Partial, ...], master_gain: float) -> Curve:
    return combine_curves((partial.data for partial in partials), master_gain)


def make_initial_state() -> AppState:
    fundamental_frequency = DEFAULT_FUNDAMENTAL_FREQUENCY
    partials = tuple(
        make_partial(fundamental_frequency, harmonic)
        for harmonic in range(1, HARMONICS_COUNT + 1)
    )
    return AppState(
        playing=False,
        master_gain=DEFAULT_MASTER_GAIN,
        fundamental_frequency=fundamental_frequency,
        partials=partials,
        total_curve=combine_partials(partials, DEFAULT_MASTER_GAIN),
    )
