"""Data model for workflow graph manifests.

A manifest maps each workflow name to a linear control-flow graph that an
editor or dashboard can render without re-running the compiler.
"""

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


MANIFEST_VERSION = "1.0.0"


class NodeType(str, Enum):
    """Rendering variant of a node."""

    workflow_start = "workflowStart"
    step = "step"
    workflow_call = "workflowCall"
    workflow_end = "workflowEnd"


class NodeKind(str, Enum):
    """Semantic tag carried in the node payload."""

    workflow_start = "workflow_start"
    step = "step"
    workflow = "workflow"
    workflow_end = "workflow_end"


class EdgeType(str, Enum):
    """Edge variants. Only sequential flow exists today."""

    default = "default"


class _WireModel(BaseModel):
    """snake_case in python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(_WireModel):
    """default layout coordinate."""

    x: float
    y: float


class NodeData(_WireModel):
    label: str
    node_kind: NodeKind
    step_id: str | None = None  # absent for start/end nodes
    line: int = 0


class GraphNode(_WireModel):
    """a visual element in a workflow graph."""

    id: str
    node_type: NodeType = Field(alias="type")
    position: Position
    data: NodeData


class GraphEdge(_WireModel):
    """a directed connection between two nodes of the same graph."""

    id: str
    source: str
    target: str
    edge_type: EdgeType = Field(default=EdgeType.default, alias="type")


class WorkflowGraph(_WireModel):
    """The control-flow graph of one workflow.

    Nodes are kept in creation order: start first, then steps and
    sub-workflow calls in visitation order, end last once finished.
    """

    workflow_id: str
    workflow_name: str
    file_path: str
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_structure(self) -> Self:
        """Node ids must be unique and every edge must connect known nodes."""
        seen: set[str] = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"duplicate node id '{node.id}' in workflow '{self.workflow_name}'")
            seen.add(node.id)

        for edge in self.edges:
            if edge.source not in seen:
                raise ValueError(f"edge '{edge.id}' has unknown source '{edge.source}'")
            if edge.target not in seen:
                raise ValueError(f"edge '{edge.id}' has unknown target '{edge.target}'")

        return self

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> GraphNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def is_finished(self) -> bool:
        """True once the end node has been recorded."""
        return bool(self.nodes) and self.nodes[-1].node_type == NodeType.workflow_end


class WorkflowGraphManifest(_WireModel):
    """versioned collection of every workflow graph from one compilation unit."""

    model_config = ConfigDict(frozen=True)

    version: str = MANIFEST_VERSION
    workflows: dict[str, WorkflowGraph] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Wire form: camelCase keys, absent optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WorkflowGraphManifest":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "WorkflowGraphManifest":
        return cls.model_validate_json(text)
