"""
Skills -- discovery, structural checks, validation and scaffolding of SKILL.md files.
"""

from .checks import CheckResult
from .installer import InvalidSkillNameError, SkillInstaller
from .loader import SkillDocument, SkillInfo, SkillsLoader
from .validator import SkillValidator, ValidationResult, validate_skills

__all__ = [
    "CheckResult",
    "InvalidSkillNameError",
    "SkillDocument",
    "SkillInfo",
    "SkillInstaller",
    "SkillValidator",
    "SkillsLoader",
    "ValidationResult",
    "validate_skills",
]
