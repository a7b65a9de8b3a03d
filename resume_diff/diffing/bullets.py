"""Achievement bullet alignment within a matched experience entry."""

from __future__ import annotations

from resume_diff.diffing.models import BulletDiff
from resume_diff.diffing.similarity import (
    SIGNIFICANCE_THRESHOLD,
    is_significant_change,
    string_similarity,
)
from resume_diff.diffing.text import diff_text

# Minimum similarity for two bullets to count as the same bullet reworded.
BULLET_MATCH_THRESHOLD = 0.3


def diff_bullets(
    original_bullets: list[str] | None,
    tailored_bullets: list[str] | None,
    significance_threshold: float = SIGNIFICANCE_THRESHOLD,
) -> list[BulletDiff]:
    """Align bullets greedily by word-set similarity.

    Each original bullet, in order, claims the most similar unused tailored
    bullet scoring at least ``BULLET_MATCH_THRESHOLD``; ties go to the lowest
    tailored index. Originals with no candidate are ``removed``. Unclaimed
    tailored bullets follow as ``added`` in their input order.

    Greedy, not an optimal assignment: an earlier original bullet may claim
    a tailored bullet that a later one would have matched better.
    """
    original_bullets = original_bullets or []
    tailored_bullets = tailored_bullets or []

    used = [False] * len(tailored_bullets)
    result: list[BulletDiff] = []

    for original in original_bullets:
        best_index: int | None = None
        best_similarity = 0.0

        for index, tailored in enumerate(tailored_bullets):
            if used[index]:
                continue
            similarity = string_similarity(original, tailored)
            if similarity < BULLET_MATCH_THRESHOLD:
                continue
            if best_index is None or similarity > best_similarity:
                best_index = index
                best_similarity = similarity

        if best_index is None:
            result.append(BulletDiff.removed(original))
            continue

        used[best_index] = True
        tailored = tailored_bullets[best_index]
        result.append(
            BulletDiff.matched(
                original_bullet=original,
                tailored_bullet=tailored,
                diff=diff_text(original, tailored),
                similarity=best_similarity,
                is_significant=is_significant_change(
                    original, tailored, threshold=significance_threshold
                ),
            )
        )

    for index, tailored in enumerate(tailored_bullets):
        if not used[index]:
            result.append(BulletDiff.added(tailored))

    return result
