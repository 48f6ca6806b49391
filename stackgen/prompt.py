"""Interactive prompt collector.

Reads exactly two answers (stack, database) and turns them into a
``GenerationConfig``.  Unrecognised answers fall back to defaults; there is
no re-prompting.
"""

from __future__ import annotations

from typing import TextIO

from stackgen.scaffolder.models import GenerationConfig, Stack
from stackgen.utils import console, print_info, print_warning

STACK_CHOICES: dict[str, Stack] = {
    "1": Stack.REACT_VITE_EXPRESS,
    "2": Stack.NEXTJS,
}

DEFAULT_STACK = Stack.REACT_VITE_EXPRESS

_YES_ANSWERS = frozenset({"y", "yes"})


def parse_stack_choice(answer: str) -> tuple[Stack, bool]:
    """Map the first answer to a stack.

    Returns:
        ``(stack, recognised)``; unrecognised answers yield the default stack
        with ``recognised=False``.
    """
    choice = answer.strip()
    if choice in STACK_CHOICES:
        return STACK_CHOICES[choice], True
    return DEFAULT_STACK, False


def parse_database_choice(answer: str) -> bool:
    """``"y"``/``"yes"`` in any case means a database is needed."""
    return answer.strip().lower() in _YES_ANSWERS


def _read_answer(prompt: str, stream: TextIO | None) -> str:
    try:
        return console.input(prompt, stream=stream)
    except EOFError:
        return ""


def collect_answers(stream: TextIO | None = None) -> GenerationConfig:
    """Ask both questions and return the resulting ``GenerationConfig``.

    Args:
        stream: Where to read answers from; ``None`` reads standard input.
    """
    print_info("Choose your stack:")
    for key, stack in STACK_CHOICES.items():
        print_info(f"{key}. {stack.value}")
    stack, recognised = parse_stack_choice(
        _read_answer("Enter your choice (1/2): ", stream)
    )
    if not recognised:
        print_warning(f"Invalid choice, defaulting to {DEFAULT_STACK.value}.")

    needs_database = parse_database_choice(
        _read_answer("Do you need a database? (y/n): ", stream)
    )
    return GenerationConfig(stack=stack, needs_database=needs_database)
