"""Small interactive terminal helpers: screen clearing and prompts."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Sequence


class PromptAborted(Exception):
    """Raised when the input stream closes before a prompt is answered."""


def _read(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError as exc:
        raise PromptAborted("input closed before an answer was given") from exc


def clear_screen() -> None:
    """Clear the terminal by running ``clear``; failures are ignored."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def ask_text(message: str, default: str = "", required: bool = False) -> str:
    """Ask for a line of text, falling back to ``default`` on an empty answer."""
    suffix = f" ({default})" if default else ""
    while True:
        answer = _read(f"{message}{suffix} ")
        if answer == "":
            answer = default
        if required and answer == "":
            print("Value is required")
            continue
        return answer


def select(message: str, options: Sequence[str]) -> str:
    """Let the user pick one option by number or by its exact text."""
    if not options:
        raise ValueError("select needs at least one option")
    print(message)
    for number, option in enumerate(options, start=1):
        print(f"  {number}) {option}")
    while True:
        answer = _read(f"Choose [1-{len(options)}] (default 1): ").strip()
        if answer == "":
            return options[0]
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        if answer in options:
            return answer
        print("Invalid choice")


def _parse_indices(answer: str, count: int) -> list[int] | None:
    indices = set()
    for token in answer.replace(",", " ").split():
        if not token.isdigit():
            return None
        number = int(token)
        if not 1 <= number <= count:
            return None
        indices.add(number - 1)
    return sorted(indices)


def multi_select(
    message: str, options: Sequence[str], defaults: Iterable[str] = ()
) -> list[str]:
    """Let the user pick any number of options; Enter keeps the marked ones.

    The answer is a list of option numbers separated by commas or spaces;
    a single ``-`` selects nothing. Results keep the order of ``options``.
    """
    if not options:
        return []
    chosen = set(defaults)
    print(message)
    for number, option in enumerate(options, start=1):
        mark = "x" if option in chosen else " "
        print(f"  [{mark}] {number}) {option}")
    while True:
        answer = _read(
            "Select numbers separated by commas "
            "(Enter keeps the marked ones, '-' selects none): "
        ).strip()
        if answer == "":
            return [option for option in options if option in chosen]
        if answer == "-":
            return []
        indices = _parse_indices(answer, len(options))
        if indices is None:
            print("Invalid choice")
            continue
        return [options[index] for index in indices]