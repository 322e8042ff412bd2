from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


class ValidationIssue(BaseModel):
    """
    Data model representing a single finding of a validation run.
    """
    model_config = ConfigDict(frozen=True)

    code: str  # e.g., 'MISSING_ALT', 'DUPLICATE_ELEMENT', 'MISSING_BODY'
    message: str  # Self-contained, human-readable description
    element: str  # e.g., 'img', 'title', 'doctype'
    phase: str = "traversal"  # 'traversal' or 'structure'


class ValidationResult(BaseModel):
    """
    Immutable outcome of one validation run.

    An empty issue list means the document is valid. Issues are kept in
    discovery order: traversal findings first, structural findings last.
    """
    model_config = ConfigDict(frozen=True)

    issues: Tuple[ValidationIssue, ...] = ()
    source_name: str = ""

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> List[str]:
        return [issue.message for issue in self.issues]

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    def as_text(self) -> str:
        """Joins all messages with a line separator."""
        return "\n".join(self.messages)
