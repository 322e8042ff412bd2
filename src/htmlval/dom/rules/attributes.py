from typing import Dict, List, Tuple
from ..core import Node, NodeKind, RuleDefinition, RuleResult, rule_spec

# Tag -> attributes that must be present, checked in this order.
REQUIRED_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    "img": ("src", "alt"),
    "a": ("href",),
}


# --- RULES ---

@rule_spec(codes=["MISSING_SRC", "MISSING_ALT", "MISSING_HREF"])
def check_required_attributes(node: Node, ctx) -> List[RuleResult]:
    """
    Reports each missing required attribute separately.
    Lookups use the exact attribute name; any duplicate occurrence counts as present.
    """
    res = []
    for attr_name in REQUIRED_ATTRIBUTES.get(node.name, ()):
        if not node.has_attr(attr_name):
            res.append((
                f"MISSING_{attr_name.upper()}",
                f"<{node.name}> tag is missing '{attr_name}' attribute."
            ))
    return res


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    name="attributes",
    kind=NodeKind.ELEMENT,
    tags=REQUIRED_ATTRIBUTES.keys(),
    rules=[check_required_attributes],
    order=30
)
