"""
Skill Validator -- runs every rule over every discovered skill.

Single pass, sequential, read-only. The aggregate result carries the exit
code: 0 when every rule passed for every file, 1 otherwise.
"""

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from ..config.schema import SkillsConfig
from .checks import (
    CHECK_CODE_BLOCK,
    CHECK_FRONTMATTER,
    CHECK_ORDER,
    CHECK_SIZE,
    CheckResult,
    check_code_block,
    check_frontmatter,
    check_size,
)
from .loader import SkillsLoader

logger = structlog.get_logger()

EXIT_SUCCESS = 0
EXIT_FAILED = 1


@dataclass
class ValidationResult:
    """Results of one validation run, in scan order."""

    root: str
    max_lines: int
    skill_file: str = "SKILL.md"
    skills: list[str] = field(default_factory=list)
    results: list[CheckResult] = field(default_factory=list)

    @property
    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]

    @property
    def failed(self) -> bool:
        return any(not r.passed for r in self.results)

    @property
    def exit_code(self) -> int:
        return EXIT_FAILED if self.failed else EXIT_SUCCESS

    def by_check(self, check: str) -> list[CheckResult]:
        return [r for r in self.results if r.check == check]


class SkillValidator:
    """Validates a skills tree against the structural rules."""

    def __init__(self, config: SkillsConfig):
        self.config = config
        self.loader = SkillsLoader(config.root, skill_file=config.skill_file)
        self.log = logger.bind(component="validator")

    def validate(self) -> ValidationResult:
        """Scan the tree once and apply every rule to every file.

        Returns:
            ValidationResult with results grouped by check, each group in
            skill order.
        """
        docs = self.loader.load_all()
        result = ValidationResult(
            root=str(self.config.root),
            max_lines=self.config.max_lines,
            skill_file=self.config.skill_file,
            skills=[d.name for d in docs],
        )

        per_check: dict[str, list[CheckResult]] = {c: [] for c in CHECK_ORDER}
        for doc in docs:
            per_check[CHECK_SIZE].append(check_size(doc, self.config.max_lines))
            per_check[CHECK_FRONTMATTER].append(check_frontmatter(doc))
            per_check[CHECK_CODE_BLOCK].append(check_code_block(doc))

        for check in CHECK_ORDER:
            for r in per_check[check]:
                if r.passed:
                    self.log.debug("check.passed", check=r.check, skill=r.skill)
                else:
                    self.log.info(
                        "check.failed",
                        check=r.check,
                        skill=r.skill,
                        reason=r.message,
                    )
                result.results.append(r)

        self.log.info(
            "validation.complete",
            skills=len(docs),
            failures=len(result.failures),
            exit_code=result.exit_code,
        )
        return result


def validate_skills(root: str | Path, max_lines: int = 500, skill_file: str = "SKILL.md") -> ValidationResult:
    """Convenience wrapper: validate a tree without building a config first."""
    config = SkillsConfig(root=Path(root), max_lines=max_lines, skill_file=skill_file)
    return SkillValidator(config).validate()
