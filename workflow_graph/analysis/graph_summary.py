"""Basic statistics over a finished manifest.

Everything here only reads the manifest. Workflow-call nodes are resolved
against the other graphs for reporting, but the graphs themselves are never
linked together.
"""

from dataclasses import dataclass, field

from workflow_graph.models.graph_manifest import (
    NodeType,
    WorkflowGraph,
    WorkflowGraphManifest,
)


@dataclass
class GraphSummary:
    """Counts for one workflow graph."""

    workflow_name: str
    workflow_id: str
    node_count: int
    edge_count: int
    step_count: int = 0
    workflow_call_count: int = 0
    is_finished: bool = False
    step_ids: list[str] = field(default_factory=list)


@dataclass
class WorkflowCallLink:
    """A call site in one workflow pointing at another workflow."""

    caller: str
    node_id: str
    callee_id: str
    callee_name: str | None = None  # None when the callee isn't in the manifest
    line: int = 0


def summarize_graph(graph: WorkflowGraph) -> GraphSummary:
    """Summarize a single workflow graph."""
    summary = GraphSummary(
        workflow_name=graph.workflow_name,
        workflow_id=graph.workflow_id,
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        is_finished=graph.is_finished,
    )
    for node in graph.nodes:
        if node.node_type == NodeType.step:
            summary.step_count += 1
            if node.data.step_id is not None:
                summary.step_ids.append(node.data.step_id)
        elif node.node_type == NodeType.workflow_call:
            summary.workflow_call_count += 1
    return summary


def summarize_manifest(manifest: WorkflowGraphManifest) -> list[GraphSummary]:
    """Summaries for every workflow, sorted by name."""
    return [summarize_graph(manifest.workflows[name]) for name in sorted(manifest.workflows)]


def resolve_workflow_calls(manifest: WorkflowGraphManifest) -> list[WorkflowCallLink]:
    """List every workflow-call node and the graph it refers to, if present."""
    names_by_id = {graph.workflow_id: graph.workflow_name for graph in manifest.workflows.values()}

    links: list[WorkflowCallLink] = []
    for name in sorted(manifest.workflows):
        for node in manifest.workflows[name].nodes:
            if node.node_type != NodeType.workflow_call or node.data.step_id is None:
                continue
            links.append(WorkflowCallLink(
                caller=name,
                node_id=node.id,
                callee_id=node.data.step_id,
                callee_name=names_by_id.get(node.data.step_id),
                line=node.data.line,
            ))
    return links
