from __future__ import annotations

from .actions import (
    Action,
    ChangeAmplitude,
    ChangeFundamentalFrequency,
    ChangeMasterGain,
    Start,
    Stop,
    SwitchToPreset,
)
from .audio import render_tone, write_wav
from .config import (
    DEFAULT_FUNDAMENTAL_FREQUENCY,
    DEFAULT_MASTER_GAIN,
    HARMONICS_COUNT,
    SAMPLE_COUNT,
    SAMPLE_RATE,
    PresetName,
)
from .curves import combine_curves, sample_sine
from .errors import HarmonicsError, IndexOutOfRangeError, InvalidParameterError
from .logging_utils import configure_logging as _configure_logging
from .partials import Partial, retune_all, set_amplitude, set_frequency
from .reducer import reduce
from .state import AppState, make_initial_state
from .store import Store

__all__ = [
    "DEFAULT_FUNDAMENTAL_FREQUENCY",
    "DEFAULT_MASTER_GAIN",
    "HARMONICS_COUNT",
    "SAMPLE_COUNT",
    "SAMPLE_RATE",
    "Action",
    "AppState",
    "ChangeAmplitude",
    "ChangeFundamentalFrequency",
    "ChangeMasterGain",
    "HarmonicsError",
    "IndexOutOfRangeError",
    "InvalidParameterError",
    "Partial",
    "PresetName",
    "Start",
    "Stop",
    "Store",
    "SwitchToPreset",
    "combine_curves",
    "make_initial_state",
    "reduce",
    "render_tone",
    "retune_all",
    "sample_sine",
    "set_amplitude",
    "set_frequency",
    "write_wav",
]

__version__ = "0.1.0"

_configure_logging()
del _configure_logging
