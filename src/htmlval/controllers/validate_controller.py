import logging
from pathlib import Path
from typing import NamedTuple, Union

from htmlval.dom.builder import DEFAULT_BACKEND, DOMBuilder
from htmlval.dom.core import Node
from htmlval.dom.vngine import VNGINE
from htmlval.model import ValidationResult
from htmlval.services.document_loader_service import DocumentLoaderService

logger = logging.getLogger(__name__)


class LoadedDocument(NamedTuple):
    """Source text and parsed tree of one document, ready for validation."""
    source_name: str
    text: str
    root: Node


class ValidateController:
    """
    Orchestrates a validation run: load -> parse -> validate.

    Fatal conditions (unreadable file, invalid UTF-8, parser failure) raise an
    HtmlValError before any traversal starts.
    """

    def __init__(self, backend: str = DEFAULT_BACKEND):
        self.loader = DocumentLoaderService()
        self.builder = DOMBuilder(backend)
        self.engine = VNGINE()

    def load(self, path: Union[str, Path]) -> LoadedDocument:
        """Reads and parses a file without validating it."""
        text = self.loader.read_text(path)
        return self.parse(text, source_name=str(path))

    def parse(self, text: str, source_name: str = "") -> LoadedDocument:
        root = self.builder.build(text)
        return LoadedDocument(source_name=source_name, text=text, root=root)

    def validate(self, document: LoadedDocument) -> ValidationResult:
        result = self.engine.validate(document.root, source_name=document.source_name)
        logger.info(
            "Validated %s: %s",
            document.source_name or "<document>",
            "valid" if result.is_valid else f"{len(result.issues)} issue(s)"
        )
        return result

    def validate_text(self, text: str, source_name: str = "") -> ValidationResult:
        return self.validate(self.parse(text, source_name=source_name))

    def validate_file(self, path: Union[str, Path]) -> ValidationResult:
        return self.validate(self.load(path))
