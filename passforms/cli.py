"""CLI for passforms — generate, check, keyboard forms, config (show/set)."""

import argparse
import logging
from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import load_config, save_config, set_value, config_path
from .errors import PasswordError
from .evaluator import evaluate
from .generator import DEFAULT_ALPHABET, generate
from .layout import LAYOUTS, keyboard_forms

EXIT_OK = 0
EXIT_WEAK = 1
EXIT_ERROR = 2

FORM_LABELS = (
    "other layout",
    "other layout, reversed direction",
    "other layout, [Caps Lock] on",
    "other layout, reversed direction, [Caps Lock] on",
)

def cmd_generate(args):
    for i in range(args.copies):
        pw = generate(
            length=args.length,
            alphabet=args.alphabet,
            check_digits=not args.no_digits_check,
            check_letters=not args.no_letters_check,
        )
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return EXIT_OK

def cmd_check(args):
    result = evaluate(
        args.password,
        check_digits=not args.no_digits_check,
        check_letters=not args.no_letters_check,
    )
    if result["ok"]:
        print("[bold green]GOOD[/bold green]")
        return EXIT_OK
    print(f"[bold red]WEAK:[/bold red] {escape(result['explanation'])}")
    return EXIT_WEAK

def cmd_forms(args):
    forms = keyboard_forms(args.password, args.lang)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Form")
    table.add_column("Password")
    for i, (label, form) in enumerate(zip(FORM_LABELS, forms)):
        table.add_row(str(i + 1), escape(label), escape(form))
    print(table)
    return EXIT_OK

# Config subcommands

def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold magenta", title=escape(config_path()))
    table.add_column("Key")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, escape(repr(value)))
    print(table)
    return EXIT_OK

def cmd_config_set(args):
    cfg = load_config()
    try:
        set_value(cfg, args.key, args.value)
    except KeyError:
        print(f"[red]Unknown config key: {escape(args.key)}[/red]")
        return EXIT_ERROR
    except ValueError:
        print(f"[red]Invalid value for {escape(args.key)}: {escape(args.value)}[/red]")
        return EXIT_ERROR
    save_config(cfg)
    print(f"[green]Saved {escape(args.key)} = {escape(repr(cfg[args.key]))}[/green]")
    return EXIT_OK

def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )

def build_parser(cfg=None):
    cfg = cfg or load_config()
    parser = argparse.ArgumentParser(prog="passforms")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=cfg["length"], help="Password length")
    gen.add_argument("--alphabet", type=str, default=cfg["alphabet"] or DEFAULT_ALPHABET,
                     help="Characters to build the password from (>= 36 unique)")
    gen.add_argument("--copies", type=int, default=cfg["copies"], help="How many passwords to generate")
    gen.add_argument("--no-digits-check", action="store_true", help="Do not require digits")
    gen.add_argument("--no-letters-check", action="store_true", help="Do not require latin letters")
    gen.set_defaults(func=cmd_generate)

    chk = sub.add_parser("check", help="Check the quality of a password")
    chk.add_argument("password", type=str, help="Password to check (wrap in quotes)")
    chk.add_argument("--no-digits-check", action="store_true", help="Do not require digits")
    chk.add_argument("--no-letters-check", action="store_true", help="Do not require latin letters")
    chk.set_defaults(func=cmd_check)

    fm = sub.add_parser("forms", help="Show the password as typed under another layout / [Caps Lock]")
    fm.add_argument("password", type=str, help="Password (wrap in quotes)")
    fm.add_argument("--lang", choices=LAYOUTS, default=cfg["lang"], help="Layout the password was typed in")
    fm.set_defaults(func=cmd_forms)

    c = sub.add_parser("config", help="Show or change saved defaults")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Print the current settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change a setting")
    c_set.add_argument("key", type=str, help="Setting name")
    c_set.add_argument("value", type=str, help="New value ('none' resets alphabet)")
    c_set.set_defaults(func=cmd_config_set)

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        return args.func(args)
    except PasswordError as e:
        print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        return EXIT_ERROR

if __name__ == "__main__":
    raise SystemExit(main())
