"""
skillcheck - Structural linter for agent skill definitions (SKILL.md).
"""

__version__ = "0.3.0"
