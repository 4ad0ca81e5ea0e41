"""Helpers for simple menu-driven console programs."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

__all__ = ["make_selection_from", "make_file_selection"]

Ask = Callable[[str], str]


def _read_integer(prompt: str, ask: Ask, out: TextIO) -> int:
    """Prompt until the reply parses as an integer."""
    while True:
        reply = ask(prompt)
        try:
            return int(reply.strip())
        except ValueError:
            print("Illegal integer format. Try again.", file=out)


def make_selection_from(
    title: str,
    options: Iterable[str],
    ask: Ask | None = None,
    out: TextIO | None = None,
) -> int:
    """Show numbered options and prompt until a valid index is chosen.

    Returns the index of the chosen option.

    Raises:
        ValueError: if there are no options to choose from.
    """
    choices = list(options)
    if not choices:
        raise ValueError(
            "Internal error: Requesting the user to pick an item from an empty list."
        )
    ask = ask if ask is not None else input
    out = out if out is not None else sys.stdout

    print(title, file=out)
    for index, option in enumerate(choices):
        print(f"{index} {option}", file=out)

    while True:
        result = _read_integer("Your choice: ", ask, out)
        if 0 <= result < len(choices):
            return result
        print(f"Please enter a number between 0 and {len(choices) - 1}", file=out)


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    ask: Ask | None = None,
    out: TextIO | None = None,
) -> str:
    """Ask the user to pick one of the files in ``directory`` ending in ``suffix``.

    Returns the path of the chosen file, joined onto the directory.

    Raises:
        ValueError: if no file in the directory has the suffix.
    """
    effective = directory or "."
    candidates = sorted(
        entry.name for entry in os.scandir(effective) if entry.name.endswith(suffix)
    )
    if not effective.endswith("/"):
        effective += "/"

    choice = make_selection_from(
        "Please choose a demo file from this list:", candidates, ask, out
    )
    return effective + candidates[choice]