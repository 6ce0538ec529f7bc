"""
Validation Report — Writes validation results to a file.

Supports JSON (for CI/CD parsing) and Markdown (PR comments, job summaries).
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import structlog

from ..skills.checks import CHECK_CODE_BLOCK, CHECK_FRONTMATTER, CHECK_ORDER, CHECK_SIZE
from ..skills.validator import ValidationResult

logger = structlog.get_logger()

REPORT_FORMATS = ("json", "markdown")

_REPORT_EXT_MAP: dict[str, str] = {
    ".json": "json",
    ".md": "markdown",
    ".markdown": "markdown",
}

_CHECK_TITLES = {
    CHECK_SIZE: "File size",
    CHECK_FRONTMATTER: "Frontmatter",
    CHECK_CODE_BLOCK: "Code block",
}


def infer_report_format(report_file: str | Path) -> str:
    """Infer the report format from the file extension.

    Returns:
        'json' or 'markdown'. Default: 'markdown'.
    """
    ext = Path(report_file).suffix.lower()
    return _REPORT_EXT_MAP.get(ext, "markdown")


class ReportGenerator:
    """Generates reports in multiple formats from a ValidationResult."""

    def __init__(self, result: ValidationResult):
        self.result = result

    def to_dict(self) -> dict[str, Any]:
        r = self.result
        return {
            "root": r.root,
            "skill_file": r.skill_file,
            "max_lines": r.max_lines,
            "status": "failed" if r.failed else "passed",
            "exit_code": r.exit_code,
            "skills": list(r.skills),
            "failures": len(r.failures),
            "results": [asdict(c) for c in r.results],
        }

    def to_json(self) -> str:
        """Report in JSON format (for CI/CD parsing)."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def to_markdown(self) -> str:
        """Human-readable Markdown report."""
        r = self.result
        status = "FAIL failed" if r.failed else "PASS passed"

        lines = [
            "# Skill Validation Report",
            "",
            "## Summary",
            "| Field | Value |",
            "|-------|-------|",
            f"| Root | `{r.root}` |",
            f"| Status | {status} |",
            f"| Skills | {len(r.skills)} |",
            f"| Failures | {len(r.failures)} |",
            f"| Max lines | {r.max_lines} |",
            "",
        ]

        if r.skills:
            lines.append("## Results")
            header = "| Skill | " + " | ".join(_CHECK_TITLES[c] for c in CHECK_ORDER) + " |"
            lines.append(header)
            lines.append("|-------|" + "|".join("---" for _ in CHECK_ORDER) + "|")
            for skill in r.skills:
                cells = []
                for check in CHECK_ORDER:
                    match = next(
                        (c for c in r.by_check(check) if c.skill == skill), None
                    )
                    if match is None:
                        cells.append("-")
                    elif match.passed:
                        cells.append("PASS")
                    else:
                        cells.append(f"FAIL {match.message}")
                lines.append(f"| `{skill}` | " + " | ".join(cells) + " |")
            lines.append("")

        if r.failures:
            lines.append("## Failures")
            for f in r.failures:
                detail = f" ({'; '.join(d for d in f.details if d)})" if f.details else ""
                lines.append(f"- **{f.skill}** [{f.check}]: {f.message}{detail}")
            lines.append("")

        return "\n".join(lines)

    def render(self, fmt: str) -> str:
        if fmt == "json":
            return self.to_json()
        if fmt == "markdown":
            return self.to_markdown()
        raise ValueError(f"Unknown report format '{fmt}'. Available: {', '.join(REPORT_FORMATS)}")

    def write(self, report_file: str | Path, fmt: str | None = None) -> Path:
        """Write the report, creating parent directories as needed.

        Args:
            report_file: Destination path.
            fmt: 'json' or 'markdown'. None infers it from the extension.

        Returns:
            Path where the report was written.
        """
        fmt = fmt or infer_report_format(report_file)
        target = Path(report_file)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(fmt), encoding="utf-8")
        logger.info("report.written", path=str(target), format=fmt)
        return target
