"""Work experience entry matching."""

from __future__ import annotations

from resume_diff.diffing.models import ExperienceEntry, ExperienceMatchPair


def normalize_experience_key(entry: ExperienceEntry) -> str:
    """Build the ``title@company`` identity key for an entry."""
    title = (entry.title or "").strip().lower()
    company = (entry.company or "").strip().lower()
    return f"{title}@{company}"


def match_experience_entries(
    original_entries: list[ExperienceEntry] | None,
    tailored_entries: list[ExperienceEntry] | None,
) -> list[ExperienceMatchPair]:
    """Pair original and tailored entries by exact identity key.

    Each original entry, in order, takes the first unused tailored entry with
    the same key. Unmatched originals are emitted in place with no tailored
    side; leftover tailored entries follow at the end in their input order.
    Keys sharing a value bind in encounter order.
    """
    original_entries = original_entries or []
    tailored_entries = tailored_entries or []

    tailored_keys = [normalize_experience_key(entry) for entry in tailored_entries]
    used = [False] * len(tailored_entries)
    pairs: list[ExperienceMatchPair] = []

    for original in original_entries:
        key = normalize_experience_key(original)
        match: ExperienceEntry | None = None

        for index, tailored_key in enumerate(tailored_keys):
            if used[index] or tailored_key != key:
                continue
            used[index] = True
            match = tailored_entries[index]
            break

        pairs.append(ExperienceMatchPair(original=original, tailored=match, match_key=key))

    for index, tailored in enumerate(tailored_entries):
        if not used[index]:
            pairs.append(
                ExperienceMatchPair(
                    original=None, tailored=tailored, match_key=tailored_keys[index]
                )
            )

    return pairs
