"""Skill list comparison."""

from __future__ import annotations

from resume_diff.diffing.models import SkillsDiffResult


def normalize_skill(skill: str | None) -> str:
    """Normalize a skill for comparison (lowercase, trimmed)."""
    return (skill or "").strip().lower()


def _first_seen(skills: list[str]) -> dict[str, str]:
    """Map each normalized key to the display string of its first occurrence."""
    display: dict[str, str] = {}
    for skill in skills:
        display.setdefault(normalize_skill(skill), skill)
    return display


def diff_skills(
    original: list[str] | None, tailored: list[str] | None
) -> SkillsDiffResult:
    """Partition two skill lists into intersection, added and removed.

    Duplicates collapse onto their first occurrence. Intersection entries use
    the tailored spelling; removed entries use the original spelling. Output
    order follows first occurrence in the respective input list.
    """
    original_display = _first_seen(original or [])
    tailored_display = _first_seen(tailored or [])

    intersection: list[str] = []
    added: list[str] = []
    for key, display in tailored_display.items():
        if key in original_display:
            intersection.append(display)
        else:
            added.append(display)

    removed = [
        display
        for key, display in original_display.items()
        if key not in tailored_display
    ]

    return SkillsDiffResult(intersection=intersection, added=added, removed=removed)
