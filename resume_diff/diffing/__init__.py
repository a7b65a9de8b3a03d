"""Before/after resume diff engine.

This module provides functionality for:
- Word-set similarity and change significance
- Word-level text diffs of summaries and bullets
- Skill list comparison
- Pairing of experience entries and alignment of their bullets
- Roll-up statistics for review displays

Main Entry Point:
    ResumeDiffService - Compares an original resume with a tailored bundle

Example:
    from resume_diff.diffing import ResumeDiffService, OriginalResume, TailoredBundle

    service = ResumeDiffService()
    report = service.compare(
        OriginalResume.from_dict(original_data),
        TailoredBundle.from_dict(bundle_data),
    )
    print(service.format_report(report))
"""

from resume_diff.diffing.bullets import BULLET_MATCH_THRESHOLD, diff_bullets
from resume_diff.diffing.config import DiffConfig, get_diff_config, reset_diff_config
from resume_diff.diffing.documents import (
    OriginalResume,
    TailoredBundle,
    load_document,
)
from resume_diff.diffing.experience import (
    match_experience_entries,
    normalize_experience_key,
)
from resume_diff.diffing.models import (
    BulletDiff,
    DiffStats,
    DiffToken,
    ExperienceDiff,
    ExperienceEntry,
    ExperienceMatchPair,
    ResumeDiffReport,
    SkillsDiffResult,
    TokenChangeCount,
)
from resume_diff.diffing.service import ResumeDiffService
from resume_diff.diffing.similarity import (
    SIGNIFICANCE_THRESHOLD,
    is_significant_change,
    string_similarity,
)
from resume_diff.diffing.skills import diff_skills
from resume_diff.diffing.stats import compute_diff_stats
from resume_diff.diffing.text import count_changes, diff_text, has_changes

__all__ = [
    # Main service
    "ResumeDiffService",
    # Configuration
    "DiffConfig",
    "get_diff_config",
    "reset_diff_config",
    # Primitives
    "SIGNIFICANCE_THRESHOLD",
    "BULLET_MATCH_THRESHOLD",
    "string_similarity",
    "is_significant_change",
    "diff_text",
    "has_changes",
    "count_changes",
    "diff_skills",
    "normalize_experience_key",
    "match_experience_entries",
    "diff_bullets",
    "compute_diff_stats",
    # Documents
    "OriginalResume",
    "TailoredBundle",
    "load_document",
    # Models
    "DiffToken",
    "TokenChangeCount",
    "SkillsDiffResult",
    "ExperienceEntry",
    "ExperienceMatchPair",
    "ExperienceDiff",
    "BulletDiff",
    "DiffStats",
    "ResumeDiffReport",
]
