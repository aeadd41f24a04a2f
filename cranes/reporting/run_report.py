from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional

from cranes.reporting.artifact_registry import ArtifactPaths


def _fmt(v) -> str:
    if isinstance(v, float):
        return f"{v:.4f}"
    return str(v)


def write_markdown_report(out_dir: str | Path,
                          title: str,
                          summary: Mapping[str, object],
                          notes: Optional[str] = None,
                          timings_ms: Optional[Dict[str, Dict[str, float]]] = None) -> Path:
    ap = ArtifactPaths.make(out_dir)
    p = ap.reports / "technical_report.md"

    lines = [f"# {title}\n", "\n## Summary\n"]
    for k, v in summary.items():
        lines.append(f"- **{k}**: {_fmt(v)}\n")

    if timings_ms:
        sizes = sorted({s for per_method in timings_ms.values() for s in per_method},
                       key=lambda s: tuple(int(x) for x in s.split("x")))
        methods = list(timings_ms)
        lines.append("\n## Runtime (ms per grid)\n\n")
        lines.append("| grid | " + " | ".join(methods) + " |\n")
        lines.append("|---" * (len(methods) + 1) + "|\n")
        for s in sizes:
            cells = [_fmt(timings_ms[m][s]) if s in timings_ms[m] else "-" for m in methods]
            lines.append(f"| {s} | " + " | ".join(cells) + " |\n")

    if notes:
        lines.append("\n## Notes\n")
        lines.append(notes + "\n")
    lines.append("\n## Artifacts\n")
    lines.append(f"- Results: `{ap.results}`\n")
    lines.append(f"- Figures: `{ap.figures}`\n")
    lines.append(f"- Tables: `{ap.tables}`\n")

    p.write_text("".join(lines), encoding="utf-8")
    return p
