import pytest

from harmonics.config import HARMONICS_COUNT, PRESET_NAMES, preset_amplitudes
from harmonics.errors import InvalidParameterError


def test_preset_names() -> None:
    assert PRESET_NAMES == ("sine", "sawtooth", "square")


def test_preset_amplitudes_cover_every_harmonic() -> None:
    for name in PRESET_NAMES:
        assert len(preset_amplitudes(name)) == HARMONICS_COUNT


def test_preset_amplitude_values() -> None:
    assert preset_amplitudes("sine", 3) == (1.0, 0.0, 0.0)
    assert preset_amplitudes("sawtooth", 3) == pytest.approx((1.0, 0.5, 1.0 / 3))
    assert preset_amplitudes("square", 4) == pytest.approx((1.0, 0.0, 1.0 / 3, 0.0))


def test_preset_amplitudes_reject_unknown() -> None:
    with pytest.raises(InvalidParameterError):
        preset_amplitudes("triangle")  # type: ignore[arg-type]
