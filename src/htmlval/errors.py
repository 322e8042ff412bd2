# src/htmlval/errors.py


class HtmlValError(Exception):
    """
    Base class for fatal conditions that abort a validation run before traversal.
    The string form is the single user-facing message for the condition.
    """


class DocumentReadError(HtmlValError):
    """The input file could not be opened or read."""


class DocumentDecodeError(HtmlValError):
    """The input file is not valid UTF-8 text."""


class DocumentParseError(HtmlValError):
    """The tree builder rejected the markup or is not available."""


class RuleDefinitionError(HtmlValError):
    """A rule module could not be imported or exposes an invalid DEFINITION."""
