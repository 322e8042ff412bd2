import logging
from pathlib import Path
from typing import Union

from htmlval.errors import DocumentDecodeError, DocumentReadError

logger = logging.getLogger(__name__)


class DocumentLoaderService:
    """
    Reads a document from disk and decodes it as strict UTF-8.
    Each failure maps to exactly one fatal error with a single message.
    """

    @staticmethod
    def read_bytes(path: Union[str, Path]) -> bytes:
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.error("Could not read %s: %s", path, e)
            raise DocumentReadError(f"Error opening file: {path}") from e

    @staticmethod
    def decode(raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error("Content is not valid UTF-8: %s", e)
            raise DocumentDecodeError("Error converting file contents to string") from e

    def read_text(self, path: Union[str, Path]) -> str:
        """Returns the decoded contents of `path`."""
        text = self.decode(self.read_bytes(path))
        logger.debug("Loaded %d characters from %s", len(text), path)
        return text
