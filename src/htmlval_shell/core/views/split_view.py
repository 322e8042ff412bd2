# src/htmlval_shell/core/views/split_view.py
import logging
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

from htmlval.model import ValidationResult
from htmlval_shell.core.views.console_view import FAILURE_HEADER, SUCCESS_MESSAGE

logger = logging.getLogger(__name__)

SPLIT_VIEW_STYLE = Style.from_dict({
    "title": "reverse bold",
    "status": "reverse",
    "frame.label": "bold",
    "results.ok": "ansigreen",
    "results.failed": "ansired",
})

STATUS_HINT = " Tab: switch pane | Up/Down/PgUp/PgDn: scroll | q: quit "


def format_results(result: ValidationResult) -> str:
    """Plain-text body of the results pane."""
    if result.is_valid:
        return SUCCESS_MESSAGE
    lines = [FAILURE_HEADER, ""]
    lines.extend(f"{i}. {message}" for i, message in enumerate(result.messages, start=1))
    return "\n".join(lines)


def build_split_view(
        source: str,
        result: ValidationResult,
        title: str = "",
        refresh_interval: Optional[float] = None,
        input=None,
        output=None
) -> Application:
    """
    Builds the full-screen view: source on the left, findings on the right.

    The view only displays the given result; it never re-validates. `input`
    and `output` are passed through to the Application (useful for tests).
    """
    source_area = TextArea(
        text=source,
        read_only=True,
        scrollbar=True,
        line_numbers=True,
        focus_on_click=True,
    )
    results_area = TextArea(
        text=format_results(result),
        read_only=True,
        scrollbar=True,
        wrap_lines=True,
        focus_on_click=True,
        style="class:results.ok" if result.is_valid else "class:results.failed",
    )

    summary = "valid" if result.is_valid else f"{len(result.issues)} issue(s)"
    title_bar = Window(
        FormattedTextControl(f" htmlval: {title or result.source_name or '<document>'} [{summary}] "),
        height=1,
        style="class:title",
    )
    status_bar = Window(FormattedTextControl(STATUS_HINT), height=1, style="class:status")

    root_container = HSplit([
        title_bar,
        VSplit([
            Frame(source_area, title="Source"),
            Frame(results_area, title="Validation"),
        ]),
        status_bar,
    ])

    kb = KeyBindings()

    @kb.add("q")
    @kb.add("c-c")
    def _exit(event):
        event.app.exit()

    @kb.add("tab")
    def _next_pane(event):
        event.app.layout.focus_next()

    @kb.add("s-tab")
    def _previous_pane(event):
        event.app.layout.focus_previous()

    return Application(
        layout=Layout(root_container, focused_element=source_area),
        key_bindings=kb,
        style=SPLIT_VIEW_STYLE,
        full_screen=True,
        mouse_support=True,
        refresh_interval=refresh_interval,
        input=input,
        output=output,
    )


def run_split_view(source: str, result: ValidationResult, title: str = "",
                   refresh_interval: Optional[float] = None) -> None:
    """Runs the split view until the user quits."""
    app = build_split_view(source, result, title=title, refresh_interval=refresh_interval)
    logger.debug("Starting split view for %s", title or result.source_name)
    app.run()
