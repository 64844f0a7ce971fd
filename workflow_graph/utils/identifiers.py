"""Node and edge ID helpers."""

import re


# synthetic node ids, fixed for every workflow
START_NODE_ID = "start"
END_NODE_ID = "end"

_PATH_TRAVERSAL = re.compile(r"//\.\./")


def node_id(count: int) -> str:
    """Generate the id of the count-th step or workflow-call node."""
    return f"node_{count}"


def edge_id(source: str, target: str) -> str:
    """Derive an edge id from its endpoints."""
    return f"e_{source}_{target}"


def normalize_step_id(step_id: str) -> str:
    """Drop `//../` segments so compile-time ids match runtime ids.

    Graph has:   "step//../example/workflows/1_simple.ts//add"
    Runtime has: "step//example/workflows/1_simple.ts//add"
    """
    return _PATH_TRAVERSAL.sub("//", step_id)
