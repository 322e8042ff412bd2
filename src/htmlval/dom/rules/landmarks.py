from typing import List
from ..core import Node, NodeKind, RuleDefinition, RuleResult

# Element name -> context flag raised when the element is encountered.
LANDMARK_FLAGS = {
    "html": "has_html",
    "head": "has_head",
    "body": "has_body",
}


def record_landmark(node: Node, ctx) -> List[RuleResult]:
    """Marks a required top-level element as present; never reports anything itself."""
    setattr(ctx, LANDMARK_FLAGS[node.name], True)
    return []


DEFINITION = RuleDefinition(
    name="landmarks",
    kind=NodeKind.ELEMENT,
    tags=LANDMARK_FLAGS.keys(),
    rules=[record_landmark],
    order=10
)
