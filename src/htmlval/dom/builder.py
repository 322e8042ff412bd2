# src/htmlval/dom/builder.py
import logging
from typing import List, Tuple

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    FeatureNotFound,
    NavigableString,
    ParserRejectedMarkup,
    ProcessingInstruction,
    Tag,
)
from bs4.element import NamespacedAttribute

from .core import Node, NodeKind
from ..errors import DocumentParseError

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("html5lib", "html.parser")
DEFAULT_BACKEND = "html5lib"


def doctype_name(declaration: str) -> str:
    """
    Extracts the doctype name from a bs4 Doctype string.

    html5lib yields 'html' or 'html PUBLIC "..." "..."'; html.parser keeps the
    keyword when it is not written in upper case ('doctype html') and keeps the
    name as authored. The name is lowercased, as the HTML parsing algorithm does.
    """
    tokens = declaration.split()
    if tokens and tokens[0].lower() == "doctype":
        tokens = tokens[1:]
    return tokens[0].lower() if tokens else ""


class DOMBuilder:
    """
    Builder responsible for parsing raw HTML into an immutable Node tree.

    Parsing itself (tokenization, error recovery, tree construction) is
    delegated to BeautifulSoup and the configured tree builder.
    """

    def __init__(self, backend: str = DEFAULT_BACKEND):
        if backend not in SUPPORTED_BACKENDS:
            raise DocumentParseError(
                f"Unsupported parser backend '{backend}'. Choose one of: {', '.join(SUPPORTED_BACKENDS)}"
            )
        self.backend = backend

    def build(self, html: str) -> Node:
        """
        Parses raw HTML content into a DOCUMENT node.

        Args:
            html (str): The decoded markup.

        Returns:
            Node: The fully materialized tree root.

        Raises:
            DocumentParseError: If the tree builder is missing or rejects the markup.
        """
        try:
            # Keep 'class' and friends as authored strings instead of token lists.
            soup = BeautifulSoup(html, self.backend, multi_valued_attributes=None)
        except FeatureNotFound as e:
            logger.error("Parser backend '%s' is not installed: %s", self.backend, e)
            raise DocumentParseError("Error parsing HTML document") from e
        except ParserRejectedMarkup as e:
            logger.error("Parser rejected markup: %s", e)
            raise DocumentParseError("Error parsing HTML document") from e

        root = self._build_tree(soup)
        logger.debug("Built document tree with %d top-level node(s).", len(root.children))
        return root

    def _build_tree(self, element) -> Node:
        """Recursively converts a bs4 PageElement into a Node."""
        if isinstance(element, Tag):
            children = tuple(self._build_tree(child) for child in element.children)
            if isinstance(element, BeautifulSoup):
                return Node(kind=NodeKind.DOCUMENT, children=children)
            return Node(
                kind=NodeKind.ELEMENT,
                name=element.name,
                attrs=self._attributes(element),
                children=children
            )

        # All of these are NavigableString subclasses, so they are matched first.
        if isinstance(element, Doctype):
            return Node(kind=NodeKind.DOCTYPE, name=doctype_name(str(element)))
        if isinstance(element, Comment):
            return Node(kind=NodeKind.COMMENT, content=str(element))
        if isinstance(element, CData):
            return Node(kind=NodeKind.CDATA, content=str(element))
        if isinstance(element, ProcessingInstruction):
            return Node(kind=NodeKind.PROCESSING_INSTRUCTION, content=str(element))
        if isinstance(element, Declaration):
            return Node(kind=NodeKind.DECLARATION, content=str(element))
        if isinstance(element, NavigableString):
            return Node(kind=NodeKind.TEXT, content=str(element))

        raise DocumentParseError(f"Unexpected node in parsed document: {type(element).__name__}")

    @staticmethod
    def _attributes(tag: Tag) -> Tuple[Tuple[str, str], ...]:
        attrs: List[Tuple[str, str]] = []
        for name, value in tag.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            # Foreign attributes such as xlink:href are looked up by their local name.
            if isinstance(name, NamespacedAttribute) and name.name:
                name = name.name
            attrs.append((str(name), "" if value is None else str(value)))
        return tuple(attrs)
