"""
Console output -- human-readable validation progress, grouped by check.

Example:
    === Validating Agent Skills ===

    📏 Checking SKILL.md file sizes (max 500 lines)...
       foo:                            10 lines ✅

    📝 Checking frontmatter format...
       foo:                           ✅

    🔍 Checking for code block issues...
    ✅ No code block issues found

    ✅ All skills valid!
"""

from ..skills.checks import CHECK_CODE_BLOCK, CHECK_FRONTMATTER, CHECK_SIZE, CheckResult
from ..skills.validator import ValidationResult

OK = "✅"
FAIL = "❌"

_LABEL_WIDTH = 30
_INDENT = "   "
_DETAIL_INDENT = "      "


def _label(skill: str) -> str:
    return f"{_INDENT}{skill + ':':<{_LABEL_WIDTH}} "


def _failure_lines(prefix: str, r: CheckResult) -> list[str]:
    lines = [f"{prefix}{FAIL} {r.message}"]
    lines.extend(f"{_DETAIL_INDENT}{d}" for d in r.details if d)
    return lines


def render_console(result: ValidationResult, quiet: bool = False) -> list[str]:
    """Render a ValidationResult as output lines (no trailing newlines).

    Args:
        result: Outcome of a validation run.
        quiet: If True, passing files are omitted. Headers, failures and
            the summary are always printed.
    """
    lines = ["=== Validating Agent Skills ===", ""]

    # ── Size ──────────────────────────────────────────────────────────────
    lines.append(
        f"📏 Checking {result.skill_file} file sizes (max {result.max_lines} lines)..."
    )
    for r in result.by_check(CHECK_SIZE):
        if r.line_count is None:
            lines.extend(_failure_lines(_label(r.skill), r))
            continue
        prefix = f"{_label(r.skill)}{r.line_count:3d} lines "
        if r.passed:
            if not quiet:
                lines.append(prefix + OK)
        else:
            lines.extend(_failure_lines(prefix, r))
    lines.append("")

    # ── Frontmatter ───────────────────────────────────────────────────────
    lines.append("📝 Checking frontmatter format...")
    for r in result.by_check(CHECK_FRONTMATTER):
        if r.passed:
            if not quiet:
                lines.append(_label(r.skill) + OK)
        else:
            lines.extend(_failure_lines(_label(r.skill), r))
    lines.append("")

    # ── Code blocks ───────────────────────────────────────────────────────
    lines.append("🔍 Checking for code block issues...")
    fence_failures = [r for r in result.by_check(CHECK_CODE_BLOCK) if not r.passed]
    for r in fence_failures:
        lines.extend(_failure_lines(_label(r.skill), r))
    if not fence_failures:
        lines.append(f"{OK} No code block issues found")
    lines.append("")

    if result.failed:
        lines.append(f"{FAIL} Validation failed!")
    else:
        lines.append(f"{OK} All skills valid!")
    return lines
