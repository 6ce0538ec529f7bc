"""
Skill scaffolding -- creates new skill directories from a template.

The template passes every structural rule out of the box, so a freshly
created skill validates until someone edits it.
"""

import re
from pathlib import Path

import structlog

logger = structlog.get_logger()

_NAME_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class InvalidSkillNameError(ValueError):
    """Skill names must be lowercase kebab-case (they become directory names)."""

    pass


class SkillInstaller:
    """Creates skills under a skills root."""

    def __init__(self, root: str | Path, skill_file: str = "SKILL.md"):
        self.root = Path(root)
        self.skill_file = skill_file

    @staticmethod
    def render_template(name: str) -> str:
        return (
            f"---\n"
            f"name: {name}\n"
            f'description: "Describe when the agent should use {name}"\n'
            f"---\n\n"
            f"# {name}\n\n"
            f"Instructions for the agent here.\n"
        )

    def create_local(self, name: str) -> tuple[Path, bool]:
        """Create a skill with the template.

        Args:
            name: Name of the skill to create.

        Returns:
            (path to the definition file, True if it was written). An
            existing file is left untouched.

        Raises:
            InvalidSkillNameError: If the name is not lowercase kebab-case.
        """
        if not _NAME_RE.match(name):
            raise InvalidSkillNameError(
                f"Invalid skill name '{name}': use lowercase letters, digits and hyphens"
            )

        skill_dir = self.root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        skill_md = skill_dir / self.skill_file
        if skill_md.exists():
            logger.info("skill.create_skipped", name=name, path=str(skill_md))
            return skill_md, False

        skill_md.write_text(self.render_template(name), encoding="utf-8")
        logger.info("skill.created", name=name, path=str(skill_md))
        return skill_md, True
