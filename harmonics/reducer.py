"""
The single state transition function of the generator.

``reduce`` receives the current snapshot and a mutation and returns the next
snapshot. Every transition that touches a frequency or amplitude resamples the
affected partials immediately and recombines the total curve over all
partials, so a returned snapshot is always internally consistent.
"""

from __future__ import annotations

import logging
import operator

from .actions import (
    Action,
    ChangeAmplitude,
    ChangeFundamentalFrequency,
    ChangeMasterGain,
    Start,
    Stop,
    SwitchToPreset,
)
from .config import SAMPLE_COUNT, SAMPLE_RATE, preset_amplitudes
from .curves import check_sampling
from .errors import IndexOutOfRangeError, InvalidParameterError
from .partials import retune_all, set_amplitude, set_amplitudes
from .state import AppState, combine_partials

_LOGGER = logging.getLogger("harmonics.reducer")


def reduce(state: AppState, action: Action | object) -> AppState:
    match action:
        case Start():
            return _set_play_state(state, True)
        case Stop():
            return _set_play_state(state, False)
        case ChangeAmplitude(partial_index=index, amplitude=amplitude):
            return _change_amplitude(state, index, amplitude)
        case ChangeFundamentalFrequency(fundamental_frequency=frequency):
            return _change_fundamental_frequency(state, frequency)
        case ChangeMasterGain(master_gain=master_gain):
            return _change_master_gain(state, master_gain)
        case SwitchToPreset(preset=preset):
            return _switch_to_preset(state, preset)
        case _:
            _LOGGER.debug("Ignoring unrecognized action: %r", action)
            return state


def _with_total_curve(state: AppState, **update: object) -> AppState:
    merged = state.model_copy(update=update)
    total_curve = combine_partials(merged.partials, merged.master_gain)
    return merged.model_copy(update={"total_curve": total_curve})


def _set_play_state(state: AppState, playing: bool) -> AppState:
    _LOGGER.debug("playing -> %s", playing)
    return state.model_copy(update={"playing": playing})


def _as_index(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        return None


def _change_amplitude(state: AppState, partial_index: int, amplitude: float) -> AppState:
    count = len(state.partials)
    index = _as_index(partial_index)
    if index is None:
        _LOGGER.warning("Rejected amplitude change for non-integer index %r", partial_index)
        raise IndexOutOfRangeError(f"partial index must be an int, got {partial_index!r}")
    if not 0 <= index < count:
        _LOGGER.warning("Rejected amplitude change for partial %d of %d", index, count)
        raise IndexOutOfRangeError(f"partial index {index} outside [0, {count})")

    _LOGGER.debug("partial %d amplitude -> %s", index, amplitude)
    partials = list(state.partials)
    partials[index] = set_amplitude(partials[index], amplitude)
    return _with_total_curve(state, partials=tuple(partials))


def _change_fundamental_frequency(state: AppState, fundamental_frequency: float) -> AppState:
    try:
        check_sampling(fundamental_frequency, SAMPLE_COUNT, SAMPLE_RATE)
        # The highest harmonic must sample finitely as well.
        check_sampling(fundamental_frequency * len(state.partials), SAMPLE_COUNT, SAMPLE_RATE)
    except InvalidParameterError:
        _LOGGER.warning("Rejected fundamental frequency %r", fundamental_frequency)
        raise

    _LOGGER.debug("fundamental frequency -> %.3f Hz", fundamental_frequency)
    return _with_total_curve(
        state,
        fundamental_frequency=fundamental_frequency,
        partials=retune_all(state.partials, fundamental_frequency),
    )


def _change_master_gain(state: AppState, master_gain: float) -> AppState:
    _LOGGER.debug("master gain -> %s", master_gain)
    return _with_total_curve(state, master_gain=master_gain)


def _switch_to_preset(state: AppState, preset: str) -> AppState:
    try:
        amplitudes = preset_amplitudes(preset, len(state.partials))  # type: ignore[arg-type]
    except InvalidParameterError:
        _LOGGER.warning("Rejected unknown preset %r", preset)
        raise
    _LOGGER.debug("preset -> %s", preset)
    return _with_total_curve(state, partials=set_amplitudes(state.partials, amplitudes))
