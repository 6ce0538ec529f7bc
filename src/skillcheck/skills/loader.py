"""
Skills Loader -- Discovers skill directories and reads their definition files.

Layout expected under the skills root:

    <root>/<skill-name>/SKILL.md

Only one level is scanned. Directories without a definition file are
skipped. Each file is read once into a SkillDocument that the checks share.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger()

FRONTMATTER_DELIMITER = "---"


def split_lines(text: str) -> list[str]:
    """Split on "\n" only, the way `wc -l` counts.

    str.splitlines() would also break on form feeds and Unicode line
    separators, which can legitimately appear inside a Markdown line.
    Universal-newline reading has already turned "\r\n" and "\r" into "\n".
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


@dataclass
class SkillDocument:
    """A definition file as read from disk."""

    name: str  # enclosing directory name
    path: Path
    lines: list[str] = field(default_factory=list)
    frontmatter: dict[str, Any] | None = None
    frontmatter_error: str | None = None
    read_error: str | None = None

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def first_line(self) -> str:
        return self.lines[0] if self.lines else ""


@dataclass
class SkillInfo:
    """Summary of a skill for listings."""

    name: str
    description: str = ""
    line_count: int = 0


def parse_frontmatter(lines: list[str]) -> tuple[dict[str, Any] | None, str | None]:
    """Extract the YAML frontmatter block from the top of a file.

    Args:
        lines: File contents split into lines.

    Returns:
        (mapping, None) on success, or (None, reason) when the block is
        absent, unterminated or not a YAML mapping.
    """
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        return None, "missing"

    try:
        end = lines.index(FRONTMATTER_DELIMITER, 1)
    except ValueError:
        return None, "unterminated"

    block = "\n".join(lines[1:end])
    try:
        meta = yaml.safe_load(block)
    except yaml.YAMLError as e:
        return None, f"invalid: {e}"

    if meta is None:
        return {}, None
    if not isinstance(meta, dict):
        return None, f"invalid: expected a mapping, got {type(meta).__name__}"
    return meta, None


class SkillsLoader:
    """Discovers and reads skill definition files under a root directory."""

    def __init__(self, root: str | Path, skill_file: str = "SKILL.md"):
        self.root = Path(root)
        self.skill_file = skill_file

    def discover(self) -> list[Path]:
        """Return definition file paths, sorted by skill directory name."""
        if not self.root.is_dir():
            logger.warning("skills.root_missing", root=str(self.root))
            return []

        paths: list[Path] = []
        for skill_dir in sorted(self.root.iterdir(), key=lambda p: p.name):
            if not skill_dir.is_dir():
                continue
            skill_md = skill_dir / self.skill_file
            try:
                found = skill_md.is_file()
            except OSError as e:
                # Unsearchable directory: keep it so load() reports it as unreadable
                logger.warning("skills.dir_unreadable", path=str(skill_dir), error=str(e))
                found = True
            if found:
                paths.append(skill_md)

        logger.info(
            "skills.discovered",
            root=str(self.root),
            count=len(paths),
            names=[p.parent.name for p in paths],
        )
        return paths

    def load(self, path: Path) -> SkillDocument:
        """Read one definition file. Read failures are recorded, not raised."""
        doc = SkillDocument(name=path.parent.name, path=path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("skills.read_error", path=str(path), error=str(e))
            doc.read_error = str(e)
            return doc

        doc.lines = split_lines(text)
        doc.frontmatter, doc.frontmatter_error = parse_frontmatter(doc.lines)
        return doc

    def load_all(self) -> list[SkillDocument]:
        return [self.load(p) for p in self.discover()]

    def list_skills(self) -> list[SkillInfo]:
        """Summaries of every discovered skill, for `skillcheck list`."""
        skills: list[SkillInfo] = []
        for doc in self.load_all():
            description = ""
            if doc.frontmatter:
                description = str(doc.frontmatter.get("description") or "").strip()
            skills.append(
                SkillInfo(
                    name=doc.name,
                    description=description,
                    line_count=doc.line_count,
                )
            )
        return skills
