"""Command-line entry point and interactive main menu."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from forgecli.changelog import generate_changelog
from forgecli.help import show_help
from forgecli.readme import readme_menu
from forgecli.terminal import PromptAborted, clear_screen, select

MENU_CHANGELOG = "Generate Changelog"
MENU_README = "Generate README"
MENU_HELP = "Help"
MENU_EXIT = "Exit"

_ACTIONS = {
    MENU_CHANGELOG: generate_changelog,
    MENU_README: readme_menu,
    MENU_HELP: show_help,
}


def run_interactive() -> int:
    """Run the main menu until the user exits; returns the exit status."""
    while True:
        clear_screen()
        choice = select(
            "What do you want to do?", [MENU_CHANGELOG, MENU_README, MENU_HELP, MENU_EXIT]
        )
        if choice == MENU_EXIT:
            print("Goodbye!")
            return 0
        _ACTIONS[choice]()
        print()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forge-cli",
        description=(
            "ForgeCLI is a toolkit with useful commands for developers. It combines "
            "tools like changelog generator, README generator, and more into one "
            "CLI application."
        ),
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "changelog", help="Generate a CHANGELOG.md based on git commits"
    ).set_defaults(action=generate_changelog)
    commands.add_parser(
        "readme", help="Generate a README.md with project info"
    ).set_defaults(action=readme_menu)
    commands.add_parser(
        "help", help="Display help information for ForgeCLI"
    ).set_defaults(action=show_help)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the chosen command or the interactive menu."""
    args = _build_parser().parse_args(argv)
    action = getattr(args, "action", None)
    try:
        if action is None:
            return run_interactive()
        if action is show_help:
            clear_screen()
        action()
    except (PromptAborted, KeyboardInterrupt) as exc:
        print("Error:", exc)
        return 1
    return 0