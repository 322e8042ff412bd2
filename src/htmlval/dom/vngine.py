# src/htmlval/dom/vngine.py
import logging
from typing import Callable, Dict, Iterator, List, Optional, Set

from .core import Node, NodeKind
from .registry import RuleRegistry
from ..model import ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)


class ValidationContext:
    """
    Mutable state accumulated across one traversal.
    Answers the document-structure questions asked after the walk completes.
    """

    def __init__(self):
        self.has_doctype = False
        self.has_html = False
        self.has_head = False
        self.has_body = False
        self.seen_singletons: Set[str] = set()


class ErrorReport:
    """Append-only, ordered collection of findings for one run."""

    def __init__(self):
        self._issues: List[ValidationIssue] = []

    def append(self, code: str, message: str, element: str, phase: str = "traversal") -> None:
        self._issues.append(ValidationIssue(code=code, message=message, element=element, phase=phase))

    @property
    def messages(self) -> List[str]:
        return [issue.message for issue in self._issues]

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)


# Fixed order of the post-traversal structure check: (flag, code, element, message)
REQUIRED_STRUCTURE = (
    ("has_doctype", "MISSING_DOCTYPE", "doctype", "Missing <!DOCTYPE html> declaration."),
    ("has_html", "MISSING_HTML", "html", "Missing <html> element."),
    ("has_head", "MISSING_HEAD", "head", "Missing <head> element."),
    ("has_body", "MISSING_BODY", "body", "Missing <body> element."),
)


def check_document_structure(ctx: ValidationContext, report: ErrorReport) -> None:
    """Appends one finding per required declaration/element that was never seen."""
    for flag, code, element, message in REQUIRED_STRUCTURE:
        if not getattr(ctx, flag):
            report.append(code, message, element, phase="structure")


class VNGINE:
    """
    Validation Engine (VNGINE) for parsed HTML documents.

    It walks the node tree built by the DOMBuilder in document order, applies the
    registered rules to every node, and finishes with the document-level
    structure check.
    """

    def __init__(self):
        """Initializes the engine by discovering and loading all available rules."""
        RuleRegistry.discover()
        self._visitors: Dict[NodeKind, Callable[[Node, ValidationContext, ErrorReport], None]] = {
            NodeKind.DOCUMENT: self._visit_document,
            NodeKind.DOCTYPE: self._visit_doctype,
            NodeKind.ELEMENT: self._visit_element,
            NodeKind.TEXT: self._visit_text,
            NodeKind.COMMENT: self._visit_comment,
        }

    def validate(self, root: Node, source_name: str = "") -> ValidationResult:
        """
        Runs the full validation suite on a document tree.

        Args:
            root (Node): The DOCUMENT node of the tree. It is never modified.
            source_name (str): Optional label (e.g. a file path) carried on the result.

        Returns:
            ValidationResult: Findings in discovery order; empty when the document is valid.
        """
        ctx = ValidationContext()
        report = ErrorReport()

        self.traverse(root, ctx, report)
        check_document_structure(ctx, report)

        logger.debug("Validation of %s finished with %d issue(s).", source_name or "<document>", len(report))
        return ValidationResult(issues=tuple(report), source_name=source_name)

    def traverse(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        """Visits the node, then its children left to right, whatever the node reported."""
        visitor = self._visitors.get(node.kind)
        if visitor:
            visitor(node, ctx, report)
        else:
            logger.debug("Other node type: %s", node.kind.value)

        for child in node.children:
            self.traverse(child, ctx, report)

    # --- Visitors ---

    def _visit_document(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        logger.debug("Document")

    def _visit_doctype(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        logger.debug("Doctype: %s", node.name)
        self._apply_rules(node, "doctype", ctx, report)

    def _visit_element(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        logger.debug("Element: <%s>", node.name)
        self._apply_rules(node, node.name, ctx, report)

    def _visit_text(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        text = node.content.strip()
        if text:
            logger.debug("Text: %r", text[:50])

    def _visit_comment(self, node: Node, ctx: ValidationContext, report: ErrorReport) -> None:
        logger.debug("Comment: %r", node.content[:50])

    @staticmethod
    def _apply_rules(node: Node, element: str, ctx: ValidationContext, report: ErrorReport) -> None:
        for rule in RuleRegistry.get_rules_for(node):
            for code, msg in rule(node, ctx):
                report.append(code, msg, element)


def validate_document(root: Node, source_name: str = "", engine: Optional[VNGINE] = None) -> ValidationResult:
    """Validates a document tree with a (new or given) engine."""
    return (engine or VNGINE()).validate(root, source_name=source_name)
