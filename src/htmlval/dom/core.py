from enum import Enum
from typing import Any, Callable, FrozenSet, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict


def rule_spec(codes: List[str]):
    """
    Decorator to declare which issue codes a specific validation rule function returns.
    Facilitates auto-discovery by the RuleRegistry.
    """
    def decorator(func):
        func.defined_codes = codes
        return func
    return decorator


class NodeKind(str, Enum):
    """The closed set of node kinds a parsed document tree may contain."""
    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"

    # Produced by some tree builders; carried through but never validated.
    PROCESSING_INSTRUCTION = "processing_instruction"
    CDATA = "cdata"
    DECLARATION = "declaration"


Attribute = Tuple[str, str]


class Node(BaseModel):
    """
    Immutable node of a parsed document tree.

    Each node owns its children; the tree is built once by the DOMBuilder and
    only read afterwards.
    """
    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    name: str = ""
    attrs: Tuple[Attribute, ...] = ()
    content: str = ""
    children: Tuple["Node", ...] = ()

    def has_attr(self, name: str) -> bool:
        return any(attr_name == name for attr_name, _ in self.attrs)

    # --- Constructors ---

    @classmethod
    def document(cls, children: Iterable["Node"] = ()) -> "Node":
        return cls(kind=NodeKind.DOCUMENT, children=tuple(children))

    @classmethod
    def doctype(cls, name: str) -> "Node":
        return cls(kind=NodeKind.DOCTYPE, name=name)

    @classmethod
    def element(
            cls,
            name: str,
            attrs: Iterable[Attribute] = (),
            children: Iterable["Node"] = ()
    ) -> "Node":
        return cls(kind=NodeKind.ELEMENT, name=name, attrs=tuple(attrs), children=tuple(children))

    @classmethod
    def text(cls, content: str) -> "Node":
        return cls(kind=NodeKind.TEXT, content=content)

    @classmethod
    def comment(cls, content: str) -> "Node":
        return cls(kind=NodeKind.COMMENT, content=content)


# Type alias for rule findings: (Code, Message)
RuleResult = Tuple[str, str]

# A rule receives the node and the mutable ValidationContext of the current run.
RuleFunc = Callable[[Node, Any], List[RuleResult]]


class RuleDefinition:
    """
    Configuration object binding a family of validation rules to the node kind
    (and optionally the element tags) they apply to.
    """

    def __init__(
            self,
            name: str,
            kind: NodeKind,
            rules: List[RuleFunc],
            tags: Optional[Iterable[str]] = None,
            order: int = 100,
            possible_codes: Optional[List[str]] = None
    ):
        self.name = name
        self.kind = kind
        self.rules = list(rules)
        self.tags: Optional[FrozenSet[str]] = frozenset(tags) if tags is not None else None
        self.order = order

        # --- Auto-Discovery of Issue Codes ---
        final_codes: Set[str] = set(possible_codes or [])

        for rule in self.rules:
            if hasattr(rule, 'defined_codes'):
                final_codes.update(rule.defined_codes)

        self.codes = sorted(list(final_codes))

    def applies_to(self, node: Node) -> bool:
        """True if this definition's rules should run for the given node."""
        if node.kind != self.kind:
            return False
        return self.tags is None or node.name in self.tags
