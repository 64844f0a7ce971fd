"""Stateful recorder that turns workflow structure events into graphs.

The compiler's AST visitor drives one builder per source file:

    builder = GraphBuilder()
    builder.start_workflow("Order", "order.ts", "workflow//order.ts//Order")
    builder.add_step_node("Validate", "step//order.ts//validate", 10)
    builder.add_workflow_node("Refund", "workflow//refund.ts//Refund", 20)
    builder.finish_workflow()

    if builder.has_workflows():
        manifest = builder.to_manifest()

Events that arrive in an invalid order (a step with no workflow started,
a second finish, a repeated workflow name) never raise. They are dropped
or overwrite the earlier graph, so a malformed traversal can't abort the
host compilation.
"""

import logging

from workflow_graph.config import LayoutConfig
from workflow_graph.models.graph_manifest import (
    MANIFEST_VERSION,
    GraphEdge,
    GraphNode,
    NodeData,
    NodeKind,
    NodeType,
    Position,
    WorkflowGraph,
    WorkflowGraphManifest,
)
from workflow_graph.utils.identifiers import END_NODE_ID, START_NODE_ID, edge_id, node_id

logger = logging.getLogger(__name__)


class BuilderSealedError(RuntimeError):
    """Raised when a builder is used after to_manifest()."""


class GraphBuilder:
    """Accumulates workflow graphs for one compilation unit."""

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        self.layout = layout or LayoutConfig()
        self._graphs: dict[str, WorkflowGraph] = {}
        self._current_workflow: str | None = None
        self._current_y = self.layout.y_start
        self._node_count = 0
        self._prev_node_id: str | None = None
        self._sealed = False

    @property
    def current_workflow(self) -> str | None:
        """Name of the workflow being recorded, or None between workflows."""
        return self._current_workflow

    def _check_open(self) -> None:
        if self._sealed:
            raise BuilderSealedError("builder was already converted with to_manifest()")

    def start_workflow(self, name: str, file_path: str, workflow_id: str) -> None:
        """Begin recording a workflow and insert its start node.

        A graph already stored under `name` is replaced. A workflow that is
        still being recorded is abandoned as-is, without an end node.
        """
        self._check_open()
        if self._current_workflow is not None:
            logger.debug("abandoning unfinished workflow %r", self._current_workflow)
        if name in self._graphs:
            logger.debug("replacing existing graph for workflow %r", name)

        self._graphs[name] = WorkflowGraph(
            workflow_id=workflow_id,
            workflow_name=name,
            file_path=file_path,
        )
        self._current_workflow = name
        self._current_y = self.layout.y_start
        self._node_count = 0
        self._prev_node_id = None

        self._add_node(
            START_NODE_ID,
            NodeType.workflow_start,
            f"Start: {name}",
            NodeKind.workflow_start,
            step_id=None,
            line=0,
        )

    def add_step_node(self, step_name: str, step_id: str, line: int) -> None:
        """Record a step invocation in the current workflow."""
        self._check_open()
        added = self._add_node(
            node_id(self._node_count),
            NodeType.step,
            step_name,
            NodeKind.step,
            step_id=step_id,
            line=line,
        )
        if added:
            self._node_count += 1

    def add_workflow_node(self, workflow_name: str, workflow_id: str, line: int) -> None:
        """Record a call to another workflow.

        The node marks the call site only. The callee's own graph, if any,
        stays a separate manifest entry.
        """
        self._check_open()
        added = self._add_node(
            node_id(self._node_count),
            NodeType.workflow_call,
            workflow_name,
            NodeKind.workflow,
            step_id=workflow_id,
            line=line,
        )
        if added:
            self._node_count += 1

    def finish_workflow(self) -> None:
        """Insert the end node and close the current workflow."""
        self._check_open()
        if self._current_workflow is None:
            logger.debug("finish_workflow called with no workflow started, ignoring")
            return

        self._add_node(
            END_NODE_ID,
            NodeType.workflow_end,
            "Return",
            NodeKind.workflow_end,
            step_id=None,
            line=0,
        )
        logger.debug("finished workflow %r", self._current_workflow)

        # y and node count are only reset by the next start_workflow
        self._current_workflow = None
        self._prev_node_id = None

    def _add_node(
        self,
        id: str,
        node_type: NodeType,
        label: str,
        node_kind: NodeKind,
        step_id: str | None,
        line: int,
    ) -> bool:
        """Append a node (and the edge from the previous node) to the current graph.

        Returns False when the event was dropped because no workflow is active.
        """
        if self._current_workflow is None:
            logger.debug("no workflow started, dropping %s node %r", node_kind.value, label)
            return False

        graph = self._graphs.get(self._current_workflow)
        if graph is None:
            return False

        if self._prev_node_id is not None:
            graph.edges.append(GraphEdge(
                id=edge_id(self._prev_node_id, id),
                source=self._prev_node_id,
                target=id,
            ))

        graph.nodes.append(GraphNode(
            id=id,
            node_type=node_type,
            position=Position(x=self.layout.x, y=self._current_y),
            data=NodeData(
                label=label,
                node_kind=node_kind,
                step_id=step_id,
                line=line,
            ),
        ))
        self._prev_node_id = id
        self._current_y += self.layout.y_step
        return True

    def has_workflows(self) -> bool:
        """True once any workflow has been started, finished or not."""
        self._check_open()
        return bool(self._graphs)

    def to_manifest(self) -> WorkflowGraphManifest:
        """Hand every recorded graph over to a manifest.

        The builder keeps no reference to the graphs and can't be used
        afterwards.
        """
        self._check_open()
        graphs, self._graphs = self._graphs, {}
        self._current_workflow = None
        self._prev_node_id = None
        self._sealed = True
        return WorkflowGraphManifest(version=MANIFEST_VERSION, workflows=graphs)

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else f"current={self._current_workflow!r}"
        return f"GraphBuilder(workflows={len(self._graphs)}, {state})"
