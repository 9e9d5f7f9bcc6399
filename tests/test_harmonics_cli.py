from pathlib import Path

import pytest
import soundfile as sf

from harmonics.actions import ChangeAmplitude, ChangeFundamentalFrequency, ChangeMasterGain, SwitchToPreset
from harmonics.cli import actions_from_args, build_parser, main


def test_actions_from_args_orders_mutations() -> None:
    args = build_parser().parse_args(
        ["show", "--gain", "0.3", "--amplitude", "2=0.5", "--preset", "square", "--fundamental", "110"]
    )
    actions = actions_from_args(args)
    assert actions == [
        ChangeFundamentalFrequency(110.0),
        SwitchToPreset("square"),
        ChangeAmplitude(2, 0.5),
        ChangeMasterGain(0.3),
    ]


def test_amplitude_option_requires_index_value() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["show", "--amplitude", "nope"])


def test_show_prints_partials(capsys: pytest.CaptureFixture[str], monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HARMONICS_LOG_DIR", str(tmp_path))
    assert main(["show", "--preset", "sawtooth"]) == 0
    out = capsys.readouterr().out
    assert "Total curve peak" in out


def test_render_writes_wav(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HARMONICS_LOG_DIR", str(tmp_path))
    target = tmp_path / "out.wav"
    assert main(["render", "--duration", "0.1", "--output", str(target)]) == 0
    data, sample_rate = sf.read(str(target))
    assert sample_rate == 44_100
    assert len(data) == 4_410
    assert abs(data).max() > 0


def test_invalid_mutation_reports_failure(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HARMONICS_LOG_DIR", str(tmp_path))
    assert main(["show", "--amplitude", "20=0.5"]) == 1
    assert "IndexOutOfRangeError" in (tmp_path / "harmonics.log").read_text()
