"""Analysis utilities for workflow graph manifests."""

from workflow_graph.analysis.graph_summary import (
    GraphSummary,
    WorkflowCallLink,
    resolve_workflow_calls,
    summarize_graph,
    summarize_manifest,
)

__all__ = [
    "GraphSummary",
    "WorkflowCallLink",
    "resolve_workflow_calls",
    "summarize_graph",
    "summarize_manifest",
]
