"""Input documents for a resume comparison.

Models for the parsed original resume and the LLM-produced tailored bundle,
plus adapters that flatten both into the shapes the diff engine compares.
All fields are optional; absent values are read as empty.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from resume_diff.diffing.models import ExperienceEntry


class DocumentModel(BaseModel):
    """Base for input documents: unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class OriginalWorkExperience(DocumentModel):
    """Work history record from the parsed original resume."""

    title: str | None = None
    company: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool | None = None
    description: str | None = None
    achievements: list[str] | None = None


class TechnicalSkill(DocumentModel):
    skill: str = ""
    proficiency: float | None = None


class OriginalResume(DocumentModel):
    """Structured original resume as produced by resume parsing."""

    personal_info: dict[str, Any] | None = None
    professional_summary: str | None = None
    work_experience: list[OriginalWorkExperience] | None = None
    technical_skills: list[TechnicalSkill] | None = None
    soft_skills: list[str] | None = None
    all_skills: list[str] | None = None
    education: list[dict[str, Any]] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OriginalResume:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


class TailoredSkills(DocumentModel):
    """Tailored skills grouped by category."""

    core: list[str] | None = None
    tools: list[str] | None = None
    methodologies: list[str] | None = None
    languages: list[str] | None = None


class TailoredExperience(DocumentModel):
    """Experience record from the tailored resume."""

    employer: str | None = None
    title: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool | None = None
    description: list[str] | None = None


class TailoredResumeContent(DocumentModel):
    meta: dict[str, Any] | None = None
    summary: str | None = None
    skills: TailoredSkills | None = None
    experience: list[TailoredExperience] | None = None
    education: list[dict[str, Any]] | None = None
    certifications: list[str] | None = None


class TailoredBundle(DocumentModel):
    """LLM tailoring output: resume content plus per-section rationales."""

    tailored_resume: TailoredResumeContent = Field(default_factory=TailoredResumeContent)
    rationales: dict[str, Any] | None = None

    @field_validator("tailored_resume", mode="before")
    @classmethod
    def empty_when_missing(cls, v: object) -> object:
        """Treat an explicit null resume as empty content."""
        return {} if v is None else v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TailoredBundle:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


def original_skills(resume: OriginalResume) -> list[str]:
    """Flatten original skills.

    ``all_skills`` wins when present (even if empty); otherwise technical
    skills followed by soft skills.
    """
    if resume.all_skills is not None:
        return list(resume.all_skills)

    skills = [entry.skill for entry in resume.technical_skills or []]
    skills.extend(resume.soft_skills or [])
    return skills


def tailored_skills(bundle: TailoredBundle) -> list[str]:
    """Flatten tailored skill categories in core, tools, methodologies, languages order."""
    grouped = bundle.tailored_resume.skills
    if grouped is None:
        return []

    skills: list[str] = []
    for category in (grouped.core, grouped.tools, grouped.methodologies, grouped.languages):
        skills.extend(category or [])
    return skills


def original_experience_entries(resume: OriginalResume) -> list[ExperienceEntry]:
    """Adapt original work history; bullets are achievements then the description."""
    entries: list[ExperienceEntry] = []
    for record in resume.work_experience or []:
        bullets = list(record.achievements or [])
        if record.description:
            bullets.append(record.description)
        entries.append(
            ExperienceEntry(
                title=record.title or "",
                company=record.company or "",
                start_date=record.start_date,
                end_date=record.end_date,
                is_current=record.current,
                bullets=bullets,
            )
        )
    return entries


def tailored_experience_entries(bundle: TailoredBundle) -> list[ExperienceEntry]:
    """Adapt tailored experience; ``employer`` becomes ``company``."""
    return [
        ExperienceEntry(
            title=record.title or "",
            company=record.employer or "",
            start_date=record.start_date,
            end_date=record.end_date,
            is_current=record.is_current,
            bullets=list(record.description or []),
        )
        for record in bundle.tailored_resume.experience or []
    ]


def load_document(path: Path | str) -> dict[str, Any]:
    """Load a JSON or YAML mapping from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content cannot be parsed or is not a mapping.
    """
    document_path = Path(path)
    if not document_path.exists():
        raise FileNotFoundError(f"Document not found: {document_path}")

    raw = document_path.read_text(encoding="utf-8")
    suffix = document_path.suffix.lower()

    if suffix == ".json":
        data = _parse_json(raw, document_path)
    elif suffix in {".yaml", ".yml"}:
        data = _parse_yaml(raw, document_path)
    elif raw.lstrip().startswith(("{", "[")):
        # Looks like JSON; YAML is a superset so fall back on failure.
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            data = _parse_yaml(raw, document_path)
    else:
        data = _parse_yaml(raw, document_path)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Document must be a mapping/dict: {document_path}")
    return data


def _parse_json(raw: str, path: Path) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON document: {path}") from e


def _parse_yaml(raw: str, path: Path) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML document: {path}") from e
