"""
Tree projection.

Maps propagation records onto an org-chart style parent-pointer tree. The
record order is kept, so a parent row always precedes its children.
"""

from typing import List, Sequence

from pydantic import BaseModel

from ..core.types import PropagationRecord

ORIGIN_TOOLTIP = "Vote Origin"
FLOW_TOOLTIP = "Vote Flow"
SEEN_CLASS = "seen-relay"


class TreeNode(BaseModel):
    """One org-chart row."""
    id: str
    parent: str = ""
    parent_index: int | None = None
    name: str
    relay: str = ""
    level: int
    tooltip: str
    css_class: str
    seen: bool = False


def level_class(level: int) -> str:
    """Per-level CSS class; levels are 1-based in the rendered chart."""
    return f"graphtableclass{level + 1}"


def emit_tree(records: Sequence[PropagationRecord]) -> List[TreeNode]:
    nodes = []
    for record in records:
        css_class = level_class(record.level)
        if record.seen:
            css_class = f"{css_class} {SEEN_CLASS}"
        nodes.append(TreeNode(
            id=record.node_guid,
            parent=record.parent_guid or "",
            parent_index=record.parent_index,
            name=record.node_name,
            relay=record.relay_name,
            level=record.level,
            tooltip=ORIGIN_TOOLTIP if record.is_root else FLOW_TOOLTIP,
            css_class=css_class,
            seen=record.seen,
        ))
    return nodes
