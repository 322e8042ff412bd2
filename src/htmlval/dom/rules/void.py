from typing import List
from ..core import Node, NodeKind, RuleDefinition, RuleResult, rule_spec

VOID_ELEMENTS = frozenset([
    "area", "base", "br", "col", "embed", "hr", "img",
    "input", "link", "meta", "source", "track", "wbr",
])


@rule_spec(codes=["VOID_WITH_CHILDREN"])
def check_no_children(node: Node, ctx) -> List[RuleResult]:
    """One finding per void element that has children, however many there are."""
    if node.children:
        return [("VOID_WITH_CHILDREN", f"Void element <{node.name}> should not have children.")]
    return []


DEFINITION = RuleDefinition(
    name="void",
    kind=NodeKind.ELEMENT,
    tags=VOID_ELEMENTS,
    rules=[check_no_children],
    order=40
)
