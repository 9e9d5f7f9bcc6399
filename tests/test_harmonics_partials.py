import numpy as np
import pytest
from pydantic import ValidationError

from harmonics.config import SAMPLE_COUNT, SAMPLE_RATE
from harmonics.curves import sample_sine
from harmonics.errors import InvalidParameterError
from harmonics.partials import (
    make_partial,
    retune_all,
    set_amplitude,
    set_amplitudes,
    set_frequency,
)


def test_make_partial_fundamental_is_on() -> None:
    partial = make_partial(100.0, 1)
    assert partial.frequency == pytest.approx(100.0)
    assert partial.amplitude == 1.0
    assert partial.data.shape == (SAMPLE_COUNT,)


def test_make_partial_overtones_are_silent() -> None:
    partial = make_partial(100.0, 3)
    assert partial.frequency == pytest.approx(300.0)
    assert partial.amplitude == 0.0
    assert not np.any(partial.data)


def test_make_partial_rejects_harmonic_zero() -> None:
    with pytest.raises(InvalidParameterError):
        make_partial(100.0, 0)


def test_set_amplitude_resamples_and_keeps_original() -> None:
    original = make_partial(220.0, 2)
    updated = set_amplitude(original, 0.5)

    assert updated is not original
    assert original.amplitude == 0.0
    assert updated.amplitude == 0.5
    assert updated.frequency == original.frequency
    assert np.allclose(updated.data, sample_sine(440.0, 0.5, SAMPLE_COUNT, SAMPLE_RATE))


def test_set_frequency_keeps_amplitude() -> None:
    original = make_partial(220.0, 1)
    updated = set_frequency(original, 330.0)
    assert updated.amplitude == 1.0
    assert np.allclose(updated.data, sample_sine(330.0, 1.0, SAMPLE_COUNT, SAMPLE_RATE))


def test_retune_all_preserves_order_and_amplitudes() -> None:
    partials = tuple(
        set_amplitude(make_partial(100.0, k), 1.0 / k) for k in range(1, 5)
    )
    retuned = retune_all(partials, 50.0)

    assert [p.frequency for p in retuned] == pytest.approx([50.0, 100.0, 150.0, 200.0])
    assert [p.amplitude for p in retuned] == [p.amplitude for p in partials]


def test_set_amplitudes_requires_one_value_per_partial() -> None:
    partials = (make_partial(100.0, 1), make_partial(100.0, 2))
    with pytest.raises(InvalidParameterError):
        set_amplitudes(partials, [1.0])


def test_partial_is_frozen() -> None:
    partial = make_partial(100.0, 1)
    with pytest.raises(ValidationError):
        partial.amplitude = 0.2  # type: ignore[misc]
