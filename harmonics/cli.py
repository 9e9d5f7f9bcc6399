from __future__ import annotations

import argparse
import logging
import os
from typing import Iterable

import numpy as np
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .actions import (
    Action,
    ChangeAmplitude,
    ChangeFundamentalFrequency,
    ChangeMasterGain,
    Start,
    SwitchToPreset,
)
from .audio import render_tone, write_wav
from .config import PRESET_NAMES, SAMPLE_RATE
from .logging_utils import DEBUG_ENV, configure_logging, log_exception
from .state import AppState
from .store import Store

_LOGGER = logging.getLogger("harmonics.cli")
_CONSOLE = Console()


def _parse_amplitude(text: str) -> tuple[int, float]:
    index_text, sep, value_text = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX=VALUE, got {text!r}")
    try:
        return int(index_text), float(value_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected INDEX=VALUE, got {text!r}") from exc


def _add_state_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--fundamental", type=float, default=None, help="Fundamental frequency in Hz.")
    parser.add_argument("--gain", type=float, default=None, help="Master gain.")
    parser.add_argument("--preset", choices=PRESET_NAMES, default=None)
    parser.add_argument(
        "--amplitude",
        type=_parse_amplitude,
        action="append",
        default=[],
        metavar="INDEX=VALUE",
        help="Set the amplitude of the partial at INDEX (0-based); repeatable.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="harmonics")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the partials of the generator.")
    _add_state_options(show)

    render = sub.add_parser("render", help="Render the generator to a wav file.")
    _add_state_options(render)
    render.add_argument("--duration", type=float, default=2.0)
    render.add_argument("--output", type=str, default="harmonics.wav")
    return parser


def actions_from_args(args: argparse.Namespace) -> list[Action]:
    actions: list[Action] = []
    if args.fundamental is not None:
        actions.append(ChangeFundamentalFrequency(args.fundamental))
    if args.preset is not None:
        actions.append(SwitchToPreset(args.preset))
    for index, amplitude in args.amplitude:
        actions.append(ChangeAmplitude(index, amplitude))
    if args.gain is not None:
        actions.append(ChangeMasterGain(args.gain))
    return actions


def _state_table(state: AppState) -> Table:
    table = Table(title=f"Fundamental {state.fundamental_frequency:.2f} Hz, gain {state.master_gain:g}")
    table.add_column("#", justify="right")
    table.add_column("Frequency (Hz)", justify="right")
    table.add_column("Amplitude", justify="right")
    table.add_column("Curve peak", justify="right")
    for index, partial in enumerate(state.partials):
        table.add_row(
            str(index),
            f"{partial.frequency:.2f}",
            f"{partial.amplitude:g}",
            f"{float(np.max(np.abs(partial.data))):.4f}",
        )
    return table


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        _CONSOLE.print(line)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    try:
        parser = build_parser()
        args = parser.parse_args(argv)

        store = Store()
        for action in actions_from_args(args):
            store.dispatch(action)
        state = store.state

        if args.command == "show":
            _CONSOLE.print(_state_table(state))
            peak = float(np.max(np.abs(state.total_curve))) if state.total_curve.size else 0.0
            _print_lines([f"Total curve peak: {peak:.4f}"])
            return 0

        if args.command == "render":
            state = store.dispatch(Start())
            audio = render_tone(state, args.duration)
            path = write_wav(args.output, audio, sample_rate=SAMPLE_RATE)
            _CONSOLE.print(f"Wrote {args.duration:g}s to {path} (sr={SAMPLE_RATE})")
            return 0

        parser.print_help()
        return 1
    except Exception as exc:
        debug = bool(os.environ.get(DEBUG_ENV))
        _LOGGER.warning("harmonics CLI failed: %s", exc, exc_info=debug)
        log_exception("harmonics CLI", exc)
        _CONSOLE.print(f"[bold red]harmonics failed:[/] {type(exc).__name__}: {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
