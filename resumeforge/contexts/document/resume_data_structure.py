"""
Resume Document Structure

Defines the structured representation of resume content for RESUMEFORGE.
This structure is the interface between the Document context (which owns
loading and saving) and the Scoring and Suggestions contexts (which only read it).

Persisted data uses camelCase keys (personalInfo, fullName, startDate, ...).
from_dict() also accepts snake_case keys so hand-written YAML stays readable.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from resumeforge.contexts.document.exceptions import MalformedDocument

TEMPLATE_NAMES = ("modern", "classic", "minimal")
DEFAULT_TEMPLATE = "modern"

PERSONAL_INFO_FIELDS = ("full_name", "email", "phone", "location", "linkedin", "website")
CONTACT_FIELDS = ("full_name", "email", "phone")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _get(data: Mapping, name: str, default: Any = "") -> Any:
    """Read a field by snake_case or camelCase key."""
    if name in data:
        value = data[name]
    else:
        value = data.get(_camel(name), default)
    return default if value is None else value


def _text(data: Mapping, name: str) -> str:
    return str(_get(data, name, ""))


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _new_id() -> str:
    return uuid.uuid4().hex


def _require_mapping(value: Any, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise MalformedDocument(f"Expected a mapping, got {type(value).__name__}", path=path)
    return value


def _require_sequence(value: Any, path: str) -> Sequence:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedDocument(f"Expected a list, got {type(value).__name__}", path=path)
    return value


@dataclass
class PersonalInfo:
    """Contact and profile fields shown in the resume header."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "PersonalInfo":
        data = _require_mapping(data, "personalInfo")
        return cls(**{name: _text(data, name) for name in PERSONAL_INFO_FIELDS})

    def values(self, names: Sequence[str] = PERSONAL_INFO_FIELDS) -> List[str]:
        """Field values in the given order."""
        return [getattr(self, name) for name in names]

    def to_dict(self) -> Dict[str, str]:
        return {_camel(name): getattr(self, name) for name in PERSONAL_INFO_FIELDS}


@dataclass
class ExperienceEntry:
    """
    One work experience entry.

    Attributes:
        id: Unique identifier within the document
        company: Employer name
        position: Job title
        start_date: Free-form start date (e.g., "2021-03")
        end_date: Free-form end date, blank when current
        current: Whether this is the current position
        description: Free-text description of the role
    """

    id: str = field(default_factory=_new_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any, path: str = "experience") -> "ExperienceEntry":
        data = _require_mapping(data, path)
        return cls(
            id=_text(data, "id") or _new_id(),
            company=_text(data, "company"),
            position=_text(data, "position"),
            start_date=_text(data, "start_date"),
            end_date=_text(data, "end_date"),
            current=_flag(_get(data, "current", False)),
            description=_text(data, "description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "company": self.company,
            "position": self.position,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
            "description": self.description,
        }


@dataclass
class EducationEntry:
    """One education entry. ``gpa`` is optional and blank when absent."""

    id: str = field(default_factory=_new_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""
    gpa: str = ""

    @classmethod
    def from_dict(cls, data: Any, path: str = "education") -> "EducationEntry":
        data = _require_mapping(data, path)
        return cls(
            id=_text(data, "id") or _new_id(),
            institution=_text(data, "institution"),
            degree=_text(data, "degree"),
            field=_text(data, "field"),
            graduation_date=_text(data, "graduation_date"),
            gpa=_text(data, "gpa"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "graduationDate": self.graduation_date,
            "gpa": self.gpa,
        }


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume.

    No field is ever None: absent data is an empty string or an empty list.

    Attributes:
        personal_info: Header contact/profile fields
        summary: Professional summary text
        experience: Work history, in display order
        education: Education history, in display order
        skills: Skill names, in display order, without duplicates
        achievements: Free-text achievement lines
        selected_template: Visual template name ("modern", "classic" or "minimal")
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)
    selected_template: str = DEFAULT_TEMPLATE

    @classmethod
    def empty(cls) -> "ResumeDocument":
        """The default document used when nothing has been saved yet."""
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeDocument":
        """
        Build a document from persisted (camelCase) or snake_case data.

        Args:
            data: Mapping with personalInfo, summary, experience, education,
                  skills, achievements and optionally selectedTemplate

        Returns:
            ResumeDocument with leaf fields defaulted to empty values

        Raises:
            MalformedDocument: If required nested structure is missing or mistyped
        """
        data = _require_mapping(data, "<root>")

        if _get(data, "personal_info", None) is None:
            raise MalformedDocument("Missing personal information", path="personalInfo")
        personal_info = PersonalInfo.from_dict(_get(data, "personal_info"))

        experience = [
            ExperienceEntry.from_dict(entry, path=f"experience[{i}]")
            for i, entry in enumerate(_require_sequence(_get(data, "experience", []), "experience"))
        ]
        education = [
            EducationEntry.from_dict(entry, path=f"education[{i}]")
            for i, entry in enumerate(_require_sequence(_get(data, "education", []), "education"))
        ]
        skills = [str(s) for s in _require_sequence(_get(data, "skills", []), "skills")]
        achievements = [
            str(a) for a in _require_sequence(_get(data, "achievements", []), "achievements")
        ]

        selected_template = _text(data, "selected_template") or DEFAULT_TEMPLATE
        if selected_template not in TEMPLATE_NAMES:
            raise MalformedDocument(
                f"Unknown template '{selected_template}'. Available templates: {list(TEMPLATE_NAMES)}",
                path="selectedTemplate",
            )

        return cls(
            personal_info=personal_info,
            summary=_text(data, "summary"),
            experience=experience,
            education=education,
            skills=skills,
            achievements=achievements,
            selected_template=selected_template,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted camelCase shape."""
        return {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "skills": list(self.skills),
            "achievements": list(self.achievements),
            "selectedTemplate": self.selected_template,
        }

    def add_skill(self, skill: str) -> bool:
        """
        Append a skill unless it is blank or already listed.

        Returns:
            True if the skill was added
        """
        skill = skill.strip()
        if not skill or skill in self.skills:
            return False
        self.skills.append(skill)
        return True

    def remove_experience(self, entry_id: str) -> bool:
        """Remove the experience entry with the given id. Returns True if found."""
        before = len(self.experience)
        self.experience = [entry for entry in self.experience if entry.id != entry_id]
        return len(self.experience) != before

    def remove_education(self, entry_id: str) -> bool:
        """Remove the education entry with the given id. Returns True if found."""
        before = len(self.education)
        self.education = [entry for entry in self.education if entry.id != entry_id]
        return len(self.education) != before
