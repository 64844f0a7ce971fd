"""Manifest sinks for handing finished graphs to a visualization surface."""

import warnings
from pathlib import Path
from typing import Protocol

import httpx

from workflow_graph.builder import GraphBuilder
from workflow_graph.config import get_viewer_config
from workflow_graph.models.graph_manifest import WorkflowGraphManifest


class ManifestSink(Protocol):
    """Protocol for receiving finished manifests."""

    def write(self, manifest: WorkflowGraphManifest) -> None:
        """Write a manifest to the sink."""
        ...


class ListSink:
    """stores manifests in a list."""

    def __init__(self) -> None:
        self.manifests: list[WorkflowGraphManifest] = []

    def write(self, manifest: WorkflowGraphManifest) -> None:
        self.manifests.append(manifest)

    def clear(self) -> None:
        """Clear all manifests."""
        self.manifests.clear()


class FileSink:
    """writes the manifest to a JSON file, replacing any previous content."""

    def __init__(self, path: Path | str, indent: int | None = 2) -> None:
        self.path = Path(path)
        self.indent = indent
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, manifest: WorkflowGraphManifest) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(manifest.to_json(indent=self.indent))


class HttpSink:
    """PUTs manifests to a graph viewer server.

    Network failures only produce a warning: a viewer that is down must not
    break the build.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/workflow-graphs"

    def write(self, manifest: WorkflowGraphManifest) -> None:
        try:
            if self._client is not None:
                self._put(self._client, manifest)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    self._put(client, manifest)
        except (httpx.TransportError, httpx.HTTPStatusError) as exc:
            warnings.warn(
                f"failed to publish workflow graph manifest to {self.base_url}: {exc}",
                stacklevel=2,
            )

    def _put(self, client: httpx.Client, manifest: WorkflowGraphManifest) -> None:
        response = client.put(self.url, json=manifest.to_dict())
        response.raise_for_status()


def http_sink_from_env() -> HttpSink | None:
    """Build an HttpSink from the WORKFLOW_GRAPH_* settings, or None when publishing is off."""
    config = get_viewer_config()
    if not config["enabled"]:
        return None
    return HttpSink(config["base_url"], timeout=config["timeout"])


def emit_manifest(builder: GraphBuilder, sink: ManifestSink) -> WorkflowGraphManifest | None:
    """Convert the builder and write its manifest, unless nothing was recorded.

    Source files without workflows produce no output at all, and the
    builder is left untouched in that case.
    """
    if not builder.has_workflows():
        return None
    manifest = builder.to_manifest()
    sink.write(manifest)
    return manifest
