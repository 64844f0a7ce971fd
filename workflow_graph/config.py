"""Configuration for graph layout and manifest publishing."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

# load environment variables
load_dotenv()


class LayoutConfig(BaseModel):
    """Default top-to-bottom chain layout.

    Every node sits at the same x; y advances by y_step per node in
    creation order, start and end nodes included.
    """

    x: float = 250.0
    y_start: float = 0.0
    y_step: float = 100.0


def get_viewer_config() -> dict:
    """configure where finished manifests are published."""
    return {
        "base_url": os.getenv("WORKFLOW_GRAPH_VIEWER_URL", "http://localhost:8000"),
        "timeout": float(os.getenv("WORKFLOW_GRAPH_VIEWER_TIMEOUT", "10.0")),
        "enabled": os.getenv("WORKFLOW_GRAPH_PUBLISH", "true").lower() == "true",
    }
