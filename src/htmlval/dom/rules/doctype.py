from typing import List
from ..core import Node, NodeKind, RuleDefinition, RuleResult, rule_spec

EXPECTED_DOCTYPE = "html"


# --- RULES ---

@rule_spec(codes=["INVALID_DOCTYPE"])
def check_doctype_name(node: Node, ctx) -> List[RuleResult]:
    """The doctype name must be exactly 'html' (case-sensitive)."""
    if node.name == EXPECTED_DOCTYPE:
        ctx.has_doctype = True
        return []
    return [("INVALID_DOCTYPE", f"Invalid doctype: {node.name}. Expected <!DOCTYPE html>.")]


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    name="doctype",
    kind=NodeKind.DOCTYPE,
    rules=[check_doctype_name],
    order=10
)
