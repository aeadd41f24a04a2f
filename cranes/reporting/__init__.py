"""Run artifacts layout and markdown reports."""

from .artifact_registry import ArtifactPaths
from .run_report import write_markdown_report
