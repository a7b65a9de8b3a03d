"""Roll-up statistics for a resume comparison."""

from __future__ import annotations

from resume_diff.diffing.models import BulletDiff, DiffStats, SkillsDiffResult
from resume_diff.diffing.similarity import SIGNIFICANCE_THRESHOLD, is_significant_change


def compute_diff_stats(
    original_summary: str | None,
    tailored_summary: str | None,
    skills_diff: SkillsDiffResult,
    bullet_diffs: list[BulletDiff],
    significance_threshold: float = SIGNIFICANCE_THRESHOLD,
) -> DiffStats:
    """Aggregate summary, skill and bullet changes into counts.

    Matched bullets only count as updated when the change is significant.
    """
    bullets_updated = sum(
        1 for bullet in bullet_diffs if bullet.type == "matched" and bullet.is_significant
    )
    bullets_added = sum(1 for bullet in bullet_diffs if bullet.type == "added")
    bullets_removed = sum(1 for bullet in bullet_diffs if bullet.type == "removed")

    return DiffStats(
        summary_rewritten=is_significant_change(
            original_summary, tailored_summary, threshold=significance_threshold
        ),
        skills_added=len(skills_diff.added),
        skills_de_emphasized=len(skills_diff.removed),
        bullets_updated=bullets_updated,
        bullets_added=bullets_added,
        bullets_removed=bullets_removed,
    )
