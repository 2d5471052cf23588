"""Command line interface for the print-safety simulation."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from printsafe.config.loader import configure_from_cli
from printsafe.config.resolvers import _resolve_log_dir
from printsafe.config.settings import OutputFormat, get_settings, set_settings
from printsafe.domain.exceptions import ConfigurationError, PrintSafeError
from printsafe.rendering.filters import compose_filter
from printsafe.runners.sweep import SweepConfig, SweepRunner
from printsafe.scoring.confidence import compute_confidence
from printsafe.simulation.presets import PRESETS, apply_preset
from printsafe.simulation.state import CONTROL_RANGES, SimulationState
from printsafe.utils.logging import setup_logging


def _add_control_args(parser: argparse.ArgumentParser, help_suffix: str = "") -> None:
    for name, rng in CONTROL_RANGES.items():
        parser.add_argument(
            f"--{name}",
            type=float,
            metavar="VALUE",
            help=(
                f"{rng.hint} ({rng.minimum:g}-{rng.maximum:g}, "
                f"step {rng.step:g}){help_suffix}"
            ),
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the printsafe CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format (default: text).",
    )
    debug_group = common.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    debug_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help=(
            "Take the log directory from PATH (logs are written there as "
            "printsafe_<timestamp>.log) instead of the per-user log directory."
        ),
    )

    state_args = argparse.ArgumentParser(add_help=False)
    state_args.add_argument(
        "--preset",
        choices=list(PRESETS),
        help="Start from a named preset; explicit controls override it.",
    )
    state_args.add_argument(
        "--snap",
        action="store_true",
        help="Round explicit control values to the slider step.",
    )
    _add_control_args(state_args)

    parser = argparse.ArgumentParser(
        prog="printsafe",
        description=(
            "Estimate whether a printed visual code stays scannable under "
            "blur, contrast and noise degradation."
        ),
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    score_p = sub.add_parser(
        "score", parents=[common, state_args], help="Compute the scan confidence"
    )
    score_p.add_argument(
        "--contributors",
        action="store_true",
        help="Also show the points each control deducted.",
    )

    filter_p = sub.add_parser(
        "filter", parents=[common, state_args], help="Compose the preview filter"
    )
    filter_p.add_argument(
        "--before",
        action="store_true",
        help="Show the original, undistorted view.",
    )

    sub.add_parser("presets", parents=[common], help="List presets with their scores")

    sweep_p = sub.add_parser(
        "sweep", parents=[common], help="Score every step-aligned control combination"
    )
    _add_control_args(sweep_p, help_suffix="; pins this control")
    sweep_p.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar.",
    )

    return parser


def _build_state(args) -> SimulationState:
    """Initial preset first, then explicit control values."""
    settings = get_settings()
    state = SimulationState()
    if settings.simulation.initial_preset:
        apply_preset(state, settings.simulation.initial_preset)
    for name, rng in CONTROL_RANGES.items():
        value = getattr(args, name, None)
        if value is None:
            continue
        if settings.simulation.snap_inputs:
            value = rng.snap(value)
        state.set_value(name, value)
    return state


def _emit(payload: dict, lines: List[str]) -> None:
    if get_settings().output.format is OutputFormat.JSON:
        print(json.dumps(payload, indent=2))
    else:
        print("\n".join(lines))


def _cmd_score(args) -> None:
    settings = get_settings()
    state = _build_state(args)
    result = compute_confidence(state)
    payload = {"state": state.snapshot().as_dict(), "score": result.score, "label": result.label.value}
    lines = [
        f"Blur:       {CONTROL_RANGES['blur'].format(state.blur)}",
        f"Contrast:   {CONTROL_RANGES['contrast'].format(state.contrast)}",
        f"Noise:      {CONTROL_RANGES['noise'].format(state.noise)}",
        f"Confidence: {result.score:.1f} ({result.label.value})",
    ]
    if settings.output.include_contributors:
        payload["contributors"] = dict(result.contributors)
        lines.append("Deductions:")
        lines.extend(f"  {k}: {v:.1f}" for k, v in result.contributors.items())
    _emit(payload, lines)


def _cmd_filter(args) -> None:
    state = _build_state(args)
    descriptor = compose_filter(state, before_mode=args.before)
    payload = descriptor.as_dict()
    payload["css_filter"] = descriptor.css_filter()
    payload["noise_overlay"] = descriptor.noise_overlay_css()
    lines = [
        f"Filter:  {descriptor.css_filter()}",
        f"Overlay: {descriptor.noise_overlay_css() or 'none'}",
    ]
    _emit(payload, lines)


def _cmd_presets(args) -> None:
    rows = []
    for name, preset in PRESETS.items():
        result = compute_confidence(preset)
        rows.append({**preset.as_dict(), "name": name, "score": result.score, "label": result.label.value})
    lines = [f"{'Preset':<14} {'Blur':>5} {'Contrast':>8} {'Noise':>5}  Confidence"]
    lines.extend(
        f"{r['name']:<14} {r['blur']:>5g} {r['contrast']:>8g} {r['noise']:>5g}  "
        f"{r['score']:.1f} ({r['label']})"
        for r in rows
    )
    _emit({"presets": rows}, lines)


def _cmd_sweep(args) -> None:
    settings = get_settings()
    runner = SweepRunner(SweepConfig(
        pinned=dict(settings.sweep.pinned),
        show_progress=settings.sweep.show_progress,
    ))
    res = runner.run()
    lines = [
        f"States:     {res.n_states:,}",
        "Labels:     " + ", ".join(f"{k}={v}" for k, v in res.label_counts.items()),
        f"Score:      min {res.min_score:.1f} / mean {res.mean_score:.1f} / max {res.max_score:.1f}",
        f"Best:       {res.best.as_dict()}",
        f"Worst:      {res.worst.as_dict()}",
    ]
    _emit(res.as_dict(), lines)


COMMANDS = {
    "score": _cmd_score,
    "filter": _cmd_filter,
    "presets": _cmd_presets,
    "sweep": _cmd_sweep,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the printsafe CLI."""
    args = build_parser().parse_args(argv)
    settings = None

    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        logger, _ = setup_logging(
            log_dir=str(_resolve_log_dir(settings.logging.file_path)),
            console=settings.logging.console_output,
            level=settings.logging.level.value,
            quiet_console=not settings.debug_mode,
            file_format=settings.logging.format_string,
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        COMMANDS[args.cmd](args)
        return 0

    except ConfigurationError as e:
        logging.error("Configuration error: %s", e.message)
        for suggestion in e.suggestions:
            logging.error("  - %s", suggestion)
        return 1

    except PrintSafeError as e:
        logging.error("%s", e)
        return 1

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 130

    except Exception as e:
        logging.error("printsafe failed: %s", e)
        if settings is not None and settings.debug_mode:
            logging.exception("Full traceback:")
        return 1


if __name__ == "__main__":
    sys.exit(main())
