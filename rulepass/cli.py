"""CLI for RulePass: generate rule-checked passwords and manage default settings."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .charsets import LOWER, NUMBERS, SPECIAL, UPPER, resolve_class
from .config import coerce_setting, config_path, load_config, save_config
from .errors import PasswordError
from .generator import generate_password
from .options import (
    Mutator,
    custom_verifier,
    include_class,
    no_adjacent_repeats,
    retry_budget,
)
from .verifiers import excluding


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _mutators_from(args, settings: Dict[str, Any]) -> List[Mutator]:
    # classes given on the command line replace the saved defaults
    classes = args.classes or [resolve_class(name) for name in settings["classes"]]
    muts: List[Mutator] = [include_class(c) for c in classes]
    if args.no_repeats or settings.get("no_adjacent_repeats"):
        muts.append(no_adjacent_repeats())
    if args.exclude:
        muts.append(custom_verifier(excluding(args.exclude)))
    attempts = args.attempts if args.attempts is not None else settings["max_attempts"]
    muts.append(retry_budget(int(attempts)))
    return muts


def cmd_generate(args) -> int:
    settings = load_config()
    try:
        length = args.length if args.length is not None else int(settings["length"])
        muts = _mutators_from(args, settings)
        for i in range(args.copies):
            pw = generate_password(length, *muts)
            print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    except (PasswordError, ValueError) as e:
        print(f"[red]Failed to generate password: {escape(str(e))}[/red]")
        return 2
    return 0


def cmd_config_show(args) -> int:
    settings = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=escape(config_path()))
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, escape(str(value)))
    print(table)
    return 0


def cmd_config_set(args) -> int:
    settings = load_config()
    try:
        settings[args.key] = coerce_setting(args.key, args.value)
    except ValueError as e:
        print(f"[red]Invalid value: {escape(str(e))}[/red]")
        return 2
    save_config(settings)
    print(f"[green]Saved[/green] {args.key} = {escape(str(settings[args.key]))}")
    return 0


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rulepass", description="RulePass - rule-checked password generator")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                        help="Logging verbosity (default WARNING)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate password(s)")
    g.add_argument("--length", "-l", type=int, help="Password length (default from settings)")
    g.add_argument("--copies", "-n", type=_positive_int, default=1, help="How many passwords to print")
    # class flags keep the order they were given in
    g.add_argument("--numbers", dest="classes", action="append_const", const=NUMBERS, help="Include digits")
    g.add_argument("--lower", dest="classes", action="append_const", const=LOWER, help="Include lowercase")
    g.add_argument("--upper", dest="classes", action="append_const", const=UPPER, help="Include uppercase")
    g.add_argument("--special", dest="classes", action="append_const", const=SPECIAL, help="Include symbols")
    g.add_argument("--custom", dest="classes", action="append", metavar="CHARS",
                   help="Include a custom character set (repeatable)")
    g.add_argument("--no-repeats", action="store_true", help="Reject passwords with equal adjacent characters")
    g.add_argument("--exclude", metavar="CHARS", help="Reject passwords containing any of these characters")
    g.add_argument("--attempts", type=int, help="Retry budget (default from settings)")
    g.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Show or change default settings")
    csub = c.add_subparsers(dest="config_cmd", required=True)
    c_show = csub.add_parser("show", help="Print current settings")
    c_show.set_defaults(func=cmd_config_show)
    c_set = csub.add_parser("set", help="Change one setting")
    c_set.add_argument("key", choices=["length", "max_attempts", "classes", "no_adjacent_repeats"])
    c_set.add_argument("value", help="New value (classes: comma-separated names)")
    c_set.set_defaults(func=cmd_config_set)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
