from __future__ import annotations

import argparse
import logging
import sys

from htmlval.controllers.validate_controller import ValidateController
from htmlval.dom.builder import SUPPORTED_BACKENDS
from htmlval.errors import HtmlValError
from htmlval_shell.core.managers.config_manager import config_manager
from htmlval_shell.core.utils.configure_logging import configure_logger
from htmlval_shell.core.views.console_view import print_fatal, print_result
from htmlval_shell.core.views.outline_view import print_outline
from htmlval_shell.core.views.split_view import run_split_view

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1  # only with --strict
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlval",
        description="Validates the structure of an HTML file."
    )
    parser.add_argument("input", help="The HTML file to validate")
    parser.add_argument(
        "--parser", dest="backend", choices=SUPPORTED_BACKENDS, default=None,
        help="Tree builder used to parse the document (default from settings)."
    )
    parser.add_argument("--tree", action="store_true", default=None, help="Print the parsed document tree first.")
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="Show source and results side by side in a full-screen view."
    )
    parser.add_argument(
        "--strict", action="store_true", default=None,
        help="Exit with status 1 when validation finds errors."
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG, INFO, WARNING).")
    parser.add_argument(
        "--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
        help="Override a setting for this run, e.g. --set parser.backend=html.parser. Repeatable."
    )
    return parser


def handle_validate(args: argparse.Namespace) -> int:
    """
    Runs one validation and presents it. Returns the process exit status.
    """
    backend = args.backend or config_manager.get_nested("parser.backend", "html5lib")
    show_tree = args.tree if args.tree is not None else config_manager.get_nested("output.show_tree", False)
    strict = args.strict if args.strict is not None else config_manager.get_nested("validation.strict", False)
    color = not args.no_color and config_manager.get_nested("output.color", True)

    try:
        controller = ValidateController(backend)
        document = controller.load(args.input)
        if show_tree and not args.interactive:
            print_outline(document.root, color=color)
        result = controller.validate(document)
    except HtmlValError as e:
        print_fatal(str(e), color=color)
        return EXIT_FATAL

    if args.interactive:
        run_split_view(
            document.text,
            result,
            title=document.source_name,
            refresh_interval=config_manager.get_nested("interactive.refresh_interval", 0.5),
        )
    else:
        print_result(result, color=color)

    if not result.is_valid and strict:
        return EXIT_FINDINGS
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the validator from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    for override in args.overrides:
        key, sep, value = override.partition("=")
        if not sep or not key.strip():
            parser.error(f"invalid --set value '{override}', expected KEY=VALUE")
        if not config_manager.set_nested(key.strip(), value):
            parser.error(f"cannot set '{key.strip()}'")

    configure_logger(
        args.log_level or config_manager.get_nested("debug.level", "WARNING"),
        silenced_loggers=config_manager.get_nested("debug.silenced_loggers"),
    )
    logger.debug("Validating %s", args.input)

    return handle_validate(args)


if __name__ == "__main__":
    sys.exit(main())
