"""Data models for workflow graph manifests."""

from workflow_graph.models.graph_manifest import (
    MANIFEST_VERSION,
    EdgeType,
    GraphEdge,
    GraphNode,
    NodeData,
    NodeKind,
    NodeType,
    Position,
    WorkflowGraph,
    WorkflowGraphManifest,
)

__all__ = [
    "MANIFEST_VERSION",
    "EdgeType",
    "GraphEdge",
    "GraphNode",
    "NodeData",
    "NodeKind",
    "NodeType",
    "Position",
    "WorkflowGraph",
    "WorkflowGraphManifest",
]
