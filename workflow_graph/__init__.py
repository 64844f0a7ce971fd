"""Workflow graph manifests - control-flow graphs recorded at compile time."""

from workflow_graph.builder import BuilderSealedError, GraphBuilder
from workflow_graph.config import LayoutConfig
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
    # Data model
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
    # Builder
    "BuilderSealedError",
    "GraphBuilder",
    "LayoutConfig",
]
