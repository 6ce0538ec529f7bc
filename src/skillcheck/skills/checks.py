"""
Structural rules for skill definition files.

Each rule is a pure function SkillDocument -> CheckResult. Rules never
raise for a bad file: a violation is reported in the result and the scan
moves on to the next file.

Rules:
- size: line count must not exceed max_lines
- frontmatter: '---' block with name == directory name and a description
- code_block: first line must not hold a code fence (frontmatter wrapped
  in ``` is invisible to the runtime)
"""

from dataclasses import dataclass, field

from .loader import SkillDocument

CHECK_SIZE = "size"
CHECK_FRONTMATTER = "frontmatter"
CHECK_CODE_BLOCK = "code_block"

CHECK_ORDER = (CHECK_SIZE, CHECK_FRONTMATTER, CHECK_CODE_BLOCK)

CODE_FENCE = "```"


@dataclass
class CheckResult:
    """Outcome of one rule on one skill."""

    check: str
    skill: str
    passed: bool
    message: str = ""
    details: list[str] = field(default_factory=list)
    line_count: int | None = None


def _unreadable(check: str, doc: SkillDocument) -> CheckResult:
    return CheckResult(
        check=check,
        skill=doc.name,
        passed=False,
        message="Could not read file",
        details=[doc.read_error or ""],
    )


def check_size(doc: SkillDocument, max_lines: int = 500) -> CheckResult:
    """Rule A: the file must not exceed max_lines lines."""
    if doc.read_error is not None:
        return _unreadable(CHECK_SIZE, doc)

    count = doc.line_count
    if count > max_lines:
        return CheckResult(
            check=CHECK_SIZE,
            skill=doc.name,
            passed=False,
            message="EXCEEDS LIMIT",
            details=["Consider moving content to references/ directory"],
            line_count=count,
        )
    return CheckResult(check=CHECK_SIZE, skill=doc.name, passed=True, line_count=count)


def check_frontmatter(doc: SkillDocument) -> CheckResult:
    """Rule B: frontmatter block, name matching the directory, description.

    Sub-rules run in order and the first failure is the one reported.
    """
    if doc.read_error is not None:
        return _unreadable(CHECK_FRONTMATTER, doc)

    def fail(message: str, *details: str) -> CheckResult:
        return CheckResult(
            check=CHECK_FRONTMATTER,
            skill=doc.name,
            passed=False,
            message=message,
            details=list(details),
        )

    error = doc.frontmatter_error
    if error == "missing":
        return fail("Must start with '---'")
    if error == "unterminated":
        return fail("Frontmatter is not closed with '---'")
    if error is not None:
        return fail("Invalid YAML frontmatter", error.removeprefix("invalid: ").partition("\n")[0])

    meta = doc.frontmatter or {}

    if meta.get("name") is None:
        return fail("Missing 'name' field")

    # YAML may hand back ints or bools for bare scalars
    name = str(meta["name"]).strip()
    if name != doc.name:
        return fail(
            "Directory name mismatch",
            f"Directory: {doc.name}",
            f"Name field: {name}",
        )

    description = meta.get("description")
    if description is None or not str(description).strip():
        return fail("Missing 'description' field")

    return CheckResult(check=CHECK_FRONTMATTER, skill=doc.name, passed=True)


def check_code_block(doc: SkillDocument) -> CheckResult:
    """Rule C: the first line must not contain a code fence."""
    if doc.read_error is not None:
        return _unreadable(CHECK_CODE_BLOCK, doc)

    if CODE_FENCE in doc.first_line:
        return CheckResult(
            check=CHECK_CODE_BLOCK,
            skill=doc.name,
            passed=False,
            message="Frontmatter wrapped in code block",
        )
    return CheckResult(check=CHECK_CODE_BLOCK, skill=doc.name, passed=True)
