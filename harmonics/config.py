from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Literal, Mapping, get_args

from .errors import InvalidParameterError

# How many harmonic partials the generator carries.
HARMONICS_COUNT = 13
# How many samples are visualized in each curve.
SAMPLE_COUNT = 650
# Sample rate used for visualization; controls how much of each wave is shown.
SAMPLE_RATE = 44_100

DEFAULT_FUNDAMENTAL_FREQUENCY = 261.63  # middle C
DEFAULT_MASTER_GAIN = 0.5

PresetName = Literal["sine", "sawtooth", "square"]
PRESET_NAMES: tuple[PresetName, ...] = get_args(PresetName)


def _sine_amplitude(harmonic: int) -> float:
    return 1.0 if harmonic == 1 else 0.0


def _sawtooth_amplitude(harmonic: int) -> float:
    return 1.0 / harmonic


def _square_amplitude(harmonic: int) -> float:
    return 1.0 / harmonic if harmonic % 2 == 1 else 0.0


# Amplitude of harmonic k (1-based) for each preset.
_PRESET_RULES: Mapping[PresetName, Callable[[int], float]] = MappingProxyType(
    {
        "sine": _sine_amplitude,
        "sawtooth": _sawtooth_amplitude,
        "square": _square_amplitude,
    }
)


def preset_amplitudes(name: PresetName, count: int = HARMONICS_COUNT) -> tuple[float, ...]:
    try:
        rule = _PRESET_RULES[name]
    except KeyError as exc:
        raise InvalidParameterError(
            f"Unknown preset: {name!r} (valid: {list(PRESET_NAMES)})"
        ) from exc
    return tuple(rule(harmonic) for harmonic in range(1, count + 1))
