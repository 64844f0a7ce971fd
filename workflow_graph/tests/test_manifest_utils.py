"""Tests for manifest helpers and summaries."""

from workflow_graph.analysis.graph_summary import (
    resolve_workflow_calls,
    summarize_graph,
    summarize_manifest,
)
from workflow_graph.builder import GraphBuilder
from workflow_graph.models.graph_manifest import WorkflowGraphManifest
from workflow_graph.utils.identifiers import edge_id, node_id, normalize_step_id
from workflow_graph.utils.manifest_utils import index_nodes_by_step_id, merge_manifests


def _single(name: str, file_path: str, workflow_id: str, steps: list[str]) -> WorkflowGraphManifest:
    builder = GraphBuilder()
    builder.start_workflow(name, file_path, workflow_id)
    for i, step in enumerate(steps):
        builder.add_step_node(step, f"step//{file_path}//{step}", i + 1)
    builder.finish_workflow()
    return builder.to_manifest()


def _calling_manifest() -> WorkflowGraphManifest:
    builder = GraphBuilder()
    builder.start_workflow("Order", "order.ts", "workflow//order.ts//Order")
    builder.add_step_node("validate", "step//order.ts//validate", 3)
    builder.add_workflow_node("Refund", "workflow//order.ts//Refund", 7)
    builder.add_workflow_node("Audit", "workflow//audit.ts//Audit", 9)
    builder.finish_workflow()
    builder.start_workflow("Refund", "order.ts", "workflow//order.ts//Refund")
    builder.add_step_node("refund", "step//order.ts//refund", 20)
    builder.finish_workflow()
    return builder.to_manifest()


class TestIdentifiers:
    def test_node_and_edge_ids(self):
        assert node_id(0) == "node_0"
        assert node_id(12) == "node_12"
        assert edge_id("start", "node_0") == "e_start_node_0"

    def test_normalize_step_id(self):
        """Path traversal segments collapse so compile and runtime ids match."""
        assert (
            normalize_step_id("step//../example/workflows/1_simple.ts//add")
            == "step//example/workflows/1_simple.ts//add"
        )
        assert normalize_step_id("step//a.ts//add") == "step//a.ts//add"


class TestMergeManifests:
    """Test combining manifests from several source files."""

    def test_combines_workflows(self):
        merged = merge_manifests(
            _single("A", "a.ts", "wfA", ["x"]),
            _single("B", "b.ts", "wfB", ["y", "z"]),
        )

        assert merged.version == "1.0.0"
        assert sorted(merged.workflows) == ["A", "B"]
        assert len(merged.workflows["B"].nodes) == 4

    def test_last_manifest_wins(self):
        first = _single("A", "a.ts", "wfA", ["x"])
        second = _single("A", "a2.ts", "wfA2", ["y", "z"])
        merged = merge_manifests(first, second)

        assert merged.workflows["A"].workflow_id == "wfA2"
        assert first.workflows["A"].workflow_id == "wfA"

    def test_inputs_not_shared(self):
        first = _single("A", "a.ts", "wfA", ["x"])
        merged = merge_manifests(first)
        merged.workflows["A"].nodes.clear()

        assert len(first.workflows["A"].nodes) == 3

    def test_no_manifests(self):
        assert merge_manifests().workflows == {}


class TestIndexNodes:
    def test_groups_by_normalized_step_id(self):
        builder = GraphBuilder()
        builder.start_workflow("Loop", "loop.ts", "wf")
        builder.add_step_node("fetch", "step//../loop.ts//fetch", 2)
        builder.add_step_node("fetch", "step//loop.ts//fetch", 4)
        builder.add_step_node("save", "step//loop.ts//save", 6)
        builder.finish_workflow()
        index = index_nodes_by_step_id(builder.to_manifest().workflows["Loop"])

        assert sorted(index) == ["step//loop.ts//fetch", "step//loop.ts//save"]
        assert [n.id for n in index["step//loop.ts//fetch"]] == ["node_0", "node_1"]


class TestGraphSummary:
    """Test per-workflow statistics."""

    def test_summarize_graph(self):
        summary = summarize_graph(_calling_manifest().workflows["Order"])

        assert summary.workflow_name == "Order"
        assert summary.node_count == 5
        assert summary.edge_count == 4
        assert summary.step_count == 1
        assert summary.workflow_call_count == 2
        assert summary.is_finished
        assert summary.step_ids == ["step//order.ts//validate"]

    def test_summarize_manifest_sorted(self):
        summaries = summarize_manifest(_calling_manifest())
        assert [s.workflow_name for s in summaries] == ["Order", "Refund"]

    def test_resolve_workflow_calls(self):
        """Call sites resolve to graphs in the same manifest when present."""
        links = resolve_workflow_calls(_calling_manifest())

        assert [(l.caller, l.node_id, l.callee_name) for l in links] == [
            ("Order", "node_1", "Refund"),
            ("Order", "node_2", None),
        ]
        assert links[0].line == 7
        assert links[1].callee_id == "workflow//audit.ts//Audit"
