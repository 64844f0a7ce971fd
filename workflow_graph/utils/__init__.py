"""Utility functions for workflow graphs."""

from workflow_graph.utils.identifiers import (
    END_NODE_ID,
    START_NODE_ID,
    edge_id,
    node_id,
    normalize_step_id,
)
from workflow_graph.utils.manifest_utils import (
    index_nodes_by_step_id,
    merge_manifests,
)

__all__ = [
    "END_NODE_ID",
    "START_NODE_ID",
    "edge_id",
    "node_id",
    "normalize_step_id",
    "index_nodes_by_step_id",
    "merge_manifests",
]
