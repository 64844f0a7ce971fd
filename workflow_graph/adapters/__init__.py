"""Adapters for writing manifests out of the compiler."""

from workflow_graph.adapters.sinks import (
    FileSink,
    HttpSink,
    ListSink,
    ManifestSink,
    emit_manifest,
    http_sink_from_env,
)

__all__ = [
    "ManifestSink",
    "ListSink",
    "FileSink",
    "HttpSink",
    "emit_manifest",
    "http_sink_from_env",
]
