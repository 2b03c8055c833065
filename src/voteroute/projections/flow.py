"""
Flow projection.

Every non-root record becomes one weighted edge from its parent. Repeated
hops are kept as parallel edges: each is a separate propagation
observation, so nothing is aggregated.
"""

from typing import List, Sequence

from pydantic import BaseModel

from ..core.types import PropagationRecord


class FlowEdge(BaseModel):
    source: str
    target: str
    weight: int = 1
    level: int
    target_relay: str = ""


def emit_flow(records: Sequence[PropagationRecord]) -> List[FlowEdge]:
    return [
        FlowEdge(
            source=record.parent_guid,
            target=record.node_guid,
            level=record.level,
            target_relay=record.relay_name,
        )
        for record in records
        if not record.is_root
    ]
