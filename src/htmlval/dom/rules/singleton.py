from typing import List
from ..core import Node, NodeKind, RuleDefinition, RuleResult, rule_spec

SINGLETON_TAGS = ("title", "base")


@rule_spec(codes=["DUPLICATE_ELEMENT"])
def check_unique(node: Node, ctx) -> List[RuleResult]:
    """
    Reports every occurrence of a singleton element after the first one.
    The tag stays recorded, so a third occurrence reports again.
    """
    if node.name in ctx.seen_singletons:
        return [(
            "DUPLICATE_ELEMENT",
            f"Multiple <{node.name}> elements found. There should only be one <{node.name}> element."
        )]
    ctx.seen_singletons.add(node.name)
    return []


DEFINITION = RuleDefinition(
    name="singleton",
    kind=NodeKind.ELEMENT,
    tags=SINGLETON_TAGS,
    rules=[check_unique],
    order=20
)
