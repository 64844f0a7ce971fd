"""Helpers for combining and indexing manifests."""

from workflow_graph.models.graph_manifest import (
    MANIFEST_VERSION,
    GraphNode,
    WorkflowGraph,
    WorkflowGraphManifest,
)
from workflow_graph.utils.identifiers import normalize_step_id


def merge_manifests(*manifests: WorkflowGraphManifest) -> WorkflowGraphManifest:
    """Combine per-file manifests into one.

    A workflow name seen in more than one manifest keeps the graph from the
    last manifest given. Inputs are copied, never mutated.
    """
    workflows: dict[str, WorkflowGraph] = {}
    for manifest in manifests:
        for name, graph in manifest.workflows.items():
            workflows[name] = graph.model_copy(deep=True)
    return WorkflowGraphManifest(version=MANIFEST_VERSION, workflows=workflows)


def index_nodes_by_step_id(graph: WorkflowGraph) -> dict[str, list[GraphNode]]:
    """Group nodes by normalized step id.

    A step called twice shows up twice under the same key. Start and end
    nodes carry no step id and are never indexed.
    """
    nodes_by_step_id: dict[str, list[GraphNode]] = {}
    for node in graph.nodes:
        if node.data.step_id is None:
            continue
        key = normalize_step_id(node.data.step_id)
        nodes_by_step_id.setdefault(key, []).append(node)
    return nodes_by_step_id
