from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .config import PresetName


@dataclass(frozen=True, slots=True)
class Start:
    """Start sound ("unmute")."""


@dataclass(frozen=True, slots=True)
class Stop:
    """Stop sound ("mute")."""


@dataclass(frozen=True, slots=True)
class ChangeAmplitude:
    partial_index: int
    amplitude: float


@dataclass(frozen=True, slots=True)
class ChangeFundamentalFrequency:
    fundamental_frequency: float


@dataclass(frozen=True, slots=True)
class ChangeMasterGain:
    master_gain: float


@dataclass(frozen=True, slots=True)
class SwitchToPreset:
    """Shortcut to a classic waveform: "sine", "sawtooth" or "square"."""

    preset: PresetName


Action: TypeAlias = (
    Start | Stop | ChangeAmplitude | ChangeFundamentalFrequency | ChangeMasterGain | SwitchToPreset
)
