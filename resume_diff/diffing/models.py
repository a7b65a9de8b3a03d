"""Data models for the diff engine.

Contains Pydantic models for:
- DiffToken: One span of a word-level edit script
- SkillsDiffResult: Skill set comparison
- ExperienceEntry / ExperienceMatchPair: Work history pairing
- BulletDiff: Per-bullet comparison inside a matched entry
- DiffStats: Scalar roll-up for summary displays
- ResumeDiffReport: Complete before/after comparison

All models are immutable. Attributes are snake_case in Python and serialize
with camelCase field names (``matchKey``, ``isSignificant`` ...).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DiffTokenType = Literal["equal", "added", "removed"]
BulletDiffType = Literal["matched", "added", "removed"]


class DiffModel(BaseModel):
    """Base model for diff results: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary using camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Deserialize from dictionary (camelCase or snake_case keys)."""
        return cls.model_validate(data)


class DiffToken(DiffModel):
    """A contiguous span of text tagged as equal, added or removed."""

    type: DiffTokenType = Field(..., description="Span classification")
    text: str = Field(..., description="Span text, including whitespace")


class TokenChangeCount(DiffModel):
    """Number of added and removed spans in a token sequence."""

    added: int = Field(default=0, ge=0)
    removed: int = Field(default=0, ge=0)


class SkillsDiffResult(DiffModel):
    """Skill lists partitioned by presence in the original and tailored resume."""

    intersection: list[str] = Field(
        default_factory=list, description="Present in both (tailored spelling)"
    )
    added: list[str] = Field(
        default_factory=list, description="New in the tailored resume"
    )
    removed: list[str] = Field(
        default_factory=list, description="Dropped from the original resume"
    )


class ExperienceEntry(DiffModel):
    """One employment record in the shape shared by both resumes."""

    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Employer name")
    start_date: str | None = Field(default=None, description="Start date")
    end_date: str | None = Field(default=None, description="End date")
    is_current: bool | None = Field(default=None, description="Currently held role")
    bullets: list[str] = Field(
        default_factory=list, description="Achievement bullets in display order"
    )


class ExperienceMatchPair(DiffModel):
    """An original entry and its tailored counterpart, either side may be absent."""

    original: ExperienceEntry | None = None
    tailored: ExperienceEntry | None = None
    match_key: str = Field(..., description="Normalized title@company key")

    @model_validator(mode="after")
    def require_one_side(self) -> ExperienceMatchPair:
        if self.original is None and self.tailored is None:
            raise ValueError("ExperienceMatchPair requires an original or tailored entry")
        return self

    @property
    def is_matched(self) -> bool:
        """True when both sides are present."""
        return self.original is not None and self.tailored is not None


class BulletDiff(DiffModel):
    """Comparison result for a single achievement bullet."""

    type: BulletDiffType
    original_bullet: str | None = None
    tailored_bullet: str | None = None
    diff: list[DiffToken] | None = None
    similarity: float | None = Field(default=None, ge=0.0, le=1.0)
    is_significant: bool = True

    @classmethod
    def matched(
        cls,
        original_bullet: str,
        tailored_bullet: str,
        diff: list[DiffToken],
        similarity: float,
        is_significant: bool,
    ) -> BulletDiff:
        return cls(
            type="matched",
            original_bullet=original_bullet,
            tailored_bullet=tailored_bullet,
            diff=diff,
            similarity=similarity,
            is_significant=is_significant,
        )

    @classmethod
    def added(cls, tailored_bullet: str) -> BulletDiff:
        return cls(type="added", tailored_bullet=tailored_bullet, is_significant=True)

    @classmethod
    def removed(cls, original_bullet: str) -> BulletDiff:
        return cls(type="removed", original_bullet=original_bullet, is_significant=True)


class ExperienceDiff(DiffModel):
    """A matched experience pair together with its bullet comparison."""

    pair: ExperienceMatchPair
    bullet_diffs: list[BulletDiff] = Field(default_factory=list)


class DiffStats(DiffModel):
    """Scalar counts summarizing a resume comparison."""

    summary_rewritten: bool = False
    skills_added: int = Field(default=0, ge=0)
    skills_de_emphasized: int = Field(default=0, ge=0)
    bullets_updated: int = Field(default=0, ge=0)
    bullets_added: int = Field(default=0, ge=0)
    bullets_removed: int = Field(default=0, ge=0)


class ResumeDiffReport(DiffModel):
    """Complete before/after comparison of an original and a tailored resume.

    Education and rationales are carried through untouched for side-by-side
    display; they have no diff semantics.
    """

    original_summary: str = ""
    tailored_summary: str = ""
    summary_diff: list[DiffToken] = Field(default_factory=list)
    skills_diff: SkillsDiffResult = Field(default_factory=SkillsDiffResult)
    experience: list[ExperienceDiff] = Field(default_factory=list)
    original_education: list[dict[str, Any]] = Field(default_factory=list)
    tailored_education: list[dict[str, Any]] = Field(default_factory=list)
    rationales: dict[str, Any] = Field(default_factory=dict)
    stats: DiffStats = Field(default_factory=DiffStats)

    @property
    def bullet_diffs(self) -> list[BulletDiff]:
        """All bullet diffs across every experience pair, in pair order."""
        return [bullet for entry in self.experience for bullet in entry.bullet_diffs]
