from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import numpy as np
import soundfile as sf  # type: ignore[import]
from numpy.typing import NDArray

from .config import SAMPLE_RATE
from .errors import InvalidParameterError
from .state import AppState

_LOGGER = logging.getLogger("harmonics.audio")

FloatArray = NDArray[np.float32]
AudioNumbers = NDArray[np.floating[Any]] | Sequence[float] | FloatArray


def ensure_audio_contract(audio: AudioNumbers) -> FloatArray:
    """Normalize dtype/shape to mono float32; scale down only when the peak exceeds 1."""

    mono: FloatArray = np.asarray(audio, dtype=np.float32).reshape(-1)
    if mono.size == 0:
        return mono
    peak = float(np.max(np.abs(mono)))
    if peak > 1.0:
        mono = mono / peak
    return mono


def render_tone(state: AppState, duration: float, *, sample_rate: int = SAMPLE_RATE) -> FloatArray:
    """Render ``duration`` seconds of the additive tone described by ``state``.

    Reads ``playing``, ``master_gain`` and each partial's frequency and amplitude;
    the visualization curves are not used. A stopped generator renders silence.
    """
    if not sample_rate > 0 or math.isinf(sample_rate):
        raise InvalidParameterError(f"sample_rate must be positive, got {sample_rate!r}")
    if not duration >= 0 or not math.isfinite(duration * sample_rate):
        raise InvalidParameterError(f"duration must be finite and >= 0, got {duration!r}")

    num_samples = int(round(duration * sample_rate))
    if not state.playing:
        return np.zeros(num_samples, dtype=np.float32)

    nyquist = sample_rate / 2.0
    t = np.arange(num_samples, dtype=np.float64) / sample_rate
    mix = np.zeros(num_samples, dtype=np.float64)
    for index, partial in enumerate(state.partials):
        if partial.amplitude == 0:
            continue
        if partial.frequency >= nyquist:
            _LOGGER.debug(
                "Skipping partial %d at %.1f Hz (nyquist %.1f Hz)", index, partial.frequency, nyquist
            )
            continue
        mix += partial.amplitude * np.sin(2 * np.pi * partial.frequency * t)
    return ensure_audio_contract(state.master_gain * mix)


def write_wav(
    path: str | Path,
    audio: AudioNumbers,
    *,
    sample_rate: int = SAMPLE_RATE,
) -> Path:
    """Write mono float samples to a wav file, creating parent directories."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    normalized = ensure_audio_contract(audio)
    sf.write(target, normalized, sample_rate, subtype="FLOAT")  # type: ignore[reportUnknownMemberType]
    _LOGGER.info("Wrote %d samples to %s", normalized.size, target)
    return target
