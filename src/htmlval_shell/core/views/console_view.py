# src/htmlval_shell/core/views/console_view.py
import sys
from typing import List, Optional, TextIO, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from htmlval.model import ValidationResult

CONSOLE_STYLE = Style.from_dict({
    "ok": "ansigreen",
    "failed": "ansired bold",
    "issue": "ansired",
    "fatal": "ansired bold",
    "heading": "ansicyan",
    "label": "bold",
})

SUCCESS_MESSAGE = "No validation errors found."
FAILURE_HEADER = "HTML validation failed with errors:"

Fragments = List[Tuple[str, str]]


def emit(fragments: Fragments, stream: Optional[TextIO] = None, color: bool = True) -> None:
    """Prints one line of styled fragments. Non-tty streams receive plain text."""
    if not color:
        fragments = [("", text) for _, text in fragments]
    print_formatted_text(FormattedText(fragments), style=CONSOLE_STYLE, file=stream or sys.stdout)


def print_result(result: ValidationResult, stream: Optional[TextIO] = None, color: bool = True) -> None:
    """Prints the success line, or the failure header followed by every finding in order."""
    if result.is_valid:
        emit([("class:ok", SUCCESS_MESSAGE)], stream, color)
        return

    emit([("class:failed", FAILURE_HEADER)], stream, color)
    for message in result.messages:
        emit([("class:issue", message)], stream, color)


def print_fatal(message: str, stream: Optional[TextIO] = None, color: bool = True) -> None:
    emit([("class:fatal", f"❌ {message}")], stream, color)
