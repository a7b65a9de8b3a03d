"""Resume Diff Service.

Compares an original resume with its tailored version and produces a
structural, reviewable report: summary token diff, skill changes, matched
experience entries with per-bullet diffs, and roll-up statistics.
"""

from __future__ import annotations

import logging

from resume_diff.diffing.bullets import diff_bullets
from resume_diff.diffing.config import DiffConfig, get_diff_config
from resume_diff.diffing.documents import (
    OriginalResume,
    TailoredBundle,
    original_experience_entries,
    original_skills,
    tailored_experience_entries,
    tailored_skills,
)
from resume_diff.diffing.experience import match_experience_entries
from resume_diff.diffing.models import ExperienceDiff, ResumeDiffReport
from resume_diff.diffing.skills import diff_skills
from resume_diff.diffing.stats import compute_diff_stats
from resume_diff.diffing.text import diff_text

logger = logging.getLogger(__name__)


class ResumeDiffService:
    """Service for comparing original and tailored resumes.

    Holds no state besides its configuration, so a single instance can be
    shared between callers.
    """

    def __init__(self, config: DiffConfig | None = None):
        """Initialize the diff service.

        Args:
            config: Optional DiffConfig. Uses global config if not provided.
        """
        self.config = config or get_diff_config()

    def compare(
        self, original: OriginalResume, bundle: TailoredBundle
    ) -> ResumeDiffReport:
        """Compare an original resume against a tailored bundle.

        Args:
            original: The parsed original resume.
            bundle: The tailoring output to review.

        Returns:
            ResumeDiffReport with every section compared.
        """
        threshold = self.config.significance_threshold
        tailored = bundle.tailored_resume

        original_summary = original.professional_summary or ""
        tailored_summary = tailored.summary or ""
        summary_diff = diff_text(original_summary, tailored_summary)

        skills_diff = diff_skills(original_skills(original), tailored_skills(bundle))

        pairs = match_experience_entries(
            original_experience_entries(original),
            tailored_experience_entries(bundle),
        )
        experience: list[ExperienceDiff] = []
        for pair in pairs:
            bullet_diffs = diff_bullets(
                pair.original.bullets if pair.original else [],
                pair.tailored.bullets if pair.tailored else [],
                significance_threshold=threshold,
            )
            logger.debug(
                f"Experience '{pair.match_key}': matched={pair.is_matched}, "
                f"{len(bullet_diffs)} bullet diffs"
            )
            experience.append(ExperienceDiff(pair=pair, bullet_diffs=bullet_diffs))

        stats = compute_diff_stats(
            original_summary,
            tailored_summary,
            skills_diff,
            [bullet for entry in experience for bullet in entry.bullet_diffs],
            significance_threshold=threshold,
        )

        logger.info(
            f"Compared resumes: {len(experience)} experience pairs, "
            f"{stats.skills_added} skills added, {stats.bullets_updated} bullets updated"
        )

        return ResumeDiffReport(
            original_summary=original_summary,
            tailored_summary=tailored_summary,
            summary_diff=summary_diff,
            skills_diff=skills_diff,
            experience=experience,
            original_education=list(original.education or []),
            tailored_education=list(tailored.education or []),
            rationales=dict(bundle.rationales or {}),
            stats=stats,
        )

    def format_report(self, report: ResumeDiffReport) -> str:
        """Format a ResumeDiffReport for CLI output."""
        stats = report.stats
        lines: list[str] = []

        lines.append(
            "Summary: " + ("REWRITTEN" if stats.summary_rewritten else "unchanged")
        )
        lines.append(
            "Changes: "
            f"skills_added={stats.skills_added} "
            f"skills_de_emphasized={stats.skills_de_emphasized} "
            f"bullets_updated={stats.bullets_updated} "
            f"bullets_added={stats.bullets_added} "
            f"bullets_removed={stats.bullets_removed}"
        )

        if report.skills_diff.added:
            lines.append(f"Skills added: {', '.join(report.skills_diff.added)}")
        if report.skills_diff.removed:
            lines.append(
                f"Skills de-emphasized: {', '.join(report.skills_diff.removed)}"
            )

        if report.experience:
            lines.append("Experience:")
        for entry in report.experience:
            pair = entry.pair
            source = pair.original or pair.tailored
            label = f"{source.title} @ {source.company}"
            if pair.original is None:
                status = "new"
            elif pair.tailored is None:
                status = "dropped"
            else:
                status = "matched"

            counts = {"matched": 0, "added": 0, "removed": 0}
            for bullet in entry.bullet_diffs:
                counts[bullet.type] += 1
            lines.append(
                f"  - {label} [{status}]: "
                f"{counts['matched']} matched, "
                f"{counts['added']} added, "
                f"{counts['removed']} removed"
            )

        if report.rationales:
            lines.append("Rationales:")
            for section, value in report.rationales.items():
                if isinstance(value, list):
                    for item in value:
                        if not isinstance(item, dict):
                            lines.append(f"  - {section}: {_short_text(item)}")
                            continue
                        label = f"{item.get('title') or ''} @ {item.get('employer') or ''}"
                        lines.append(
                            f"  - {label}: {_short_text(item.get('rationale'))}"
                        )
                else:
                    lines.append(f"  - {section}: {_short_text(value)}")

        return "\n".join(lines)


def _short_text(rationale: object) -> str:
    """Return the display text of a rationale: a string or the ``short`` of an object."""
    if isinstance(rationale, dict):
        return str(rationale.get("short") or "")
    if rationale is None:
        return ""
    return str(rationale)
