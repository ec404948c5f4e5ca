"""
formdfa CLI — Run the format automata from a terminal.

Usage:
    formdfa email <text>                 # Trace an email address
    formdfa password <text>              # Trace a password
    formdfa email <text> --json          # Dump the simulation result as JSON
    formdfa password <text> --animate    # Replay step by step
    formdfa describe <automaton>         # List states of an automaton
    formdfa email -- <-text>             # Input that starts with "-"

Exit status: 0 accepted, 1 rejected, 2 usage or configuration error.
"""

import argparse
import sys
import time

from formdfa.automata.base import Automaton
from formdfa.automata.registry import AutomatonNotFoundError, get_automaton
from formdfa.config import ConfigError, FormDFAConfig
from formdfa.observability.logging import configure_logging, get_logger
from formdfa.observability.metrics import get_metrics
from formdfa.patterns import pattern_matches
from formdfa.presentation.runs import FieldSession
from formdfa.presentation.trace import final_progress_view, format_steps, state_badge
from formdfa.vocabulary import AutomatonID

logger = get_logger("cli")


EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formdfa",
        description="formdfa - Validate emails and passwords with explicit automata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Trace an email address
  formdfa email user.name+tag@sub.example.com

  # Replay a password with the pattern cross-check
  formdfa password Abcdefg1 --animate --check-pattern

  # Show the states of the email automaton
  formdfa describe email

  # Values starting with "-" go after "--"
  formdfa email -- -user@example.com
        """
    )

    parser.add_argument(
        "mode",
        choices=["email", "password", "describe"],
        help="Automaton to run, or describe"
    )
    parser.add_argument(
        "value",
        nargs="?",
        help="Input to simulate (or the automaton to describe)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the simulation result as JSON"
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Replay the run one step at a time"
    )
    parser.add_argument(
        "--check-pattern",
        action="store_true",
        help="Also report whether the reference regular expression matches"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: FORMDFA_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit logs as JSON"
    )
    return parser


def load_config(args: argparse.Namespace) -> FormDFAConfig:
    """Environment settings overridden by CLI flags."""
    config = FormDFAConfig.from_env()
    if args.log_level is not None:
        config = FormDFAConfig(
            log_level=args.log_level,
            json_logs=config.json_logs,
            animation_delay_ms=config.animation_delay_ms,
        )
    if args.json_logs:
        config.json_logs = True
    return config


def describe(automaton: Automaton) -> None:
    print(f"[{automaton.automaton_id.value}] start={automaton.start.value} trap={automaton.trap.value}")
    for info in automaton.describe_states():
        markers = []
        if info.id == automaton.start:
            markers.append("start")
        if info.accepting:
            markers.append("accepting")
        if info.trap:
            markers.append("trap")
        suffix = f" ({', '.join(markers)})" if markers else ""
        print(f"  {info.label}{suffix}")
        print(f"      {info.description}")


def run(automaton: Automaton, text: str, args: argparse.Namespace, config: FormDFAConfig) -> int:
    session = FieldSession(automaton)
    field_run = session.update(text)
    result = field_run.result

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        if args.animate:
            for frame in session.frames(field_run):
                progress = frame.progress
                print(
                    f"{progress.consumed}[{progress.current}]{progress.remaining}  "
                    f"{automaton.edge_label(frame.step.character).value:<8} "
                    f"{state_badge(frame.step.to_state, frame.accepting, frame.step.to_state == automaton.trap)}"
                )
                time.sleep(config.animation_delay_seconds)
            print(f"{final_progress_view(text[:result.consumed]).consumed}  {state_badge(result.final_state, result.accepted, result.trapped)}")
        else:
            for line in format_steps(result, automaton):
                print(line)
        print(f"Verdict: {result.verdict.value}")

    if args.check_pattern:
        matches = pattern_matches(automaton.automaton_id, text)
        print(f"Pattern: {'match' if matches else 'no match'}")

    return EXIT_ACCEPTED if result.accepted else EXIT_REJECTED


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(level=config.log_level, json_format=config.json_logs)

    if args.mode == "describe":
        if not args.value:
            parser.error("describe mode requires an automaton name")
        try:
            automaton = get_automaton(args.value)
        except AutomatonNotFoundError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return EXIT_ERROR
        describe(automaton)
        return EXIT_ACCEPTED

    automaton = get_automaton(AutomatonID(args.mode))
    try:
        return run(automaton, args.value or "", args, config)
    except KeyboardInterrupt:
        print("\n[WARNING] Interrupted by user", file=sys.stderr)
        return 130
    finally:
        logger.debug(f"metrics: {get_metrics().to_dict()}")


if __name__ == "__main__":
    sys.exit(main())
