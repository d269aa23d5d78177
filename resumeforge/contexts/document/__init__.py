"""
Document Context

Responsibilities:
- Defines the structured resume document model
- Converts between persisted data (YAML/JSON, camelCase keys) and ResumeDocument
- Loads and saves documents keyed by an opaque document id

Owns: Resume document model, resume persistence
Never: Scores or rewrites resume content
"""

from resumeforge.contexts.document.exceptions import MalformedDocument
from resumeforge.contexts.document.resume_data_structure import (
    TEMPLATE_NAMES,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
)
from resumeforge.contexts.document.resume_repository import ResumeRepository, load_resume_file

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "TEMPLATE_NAMES",
    # Persistence
    "ResumeRepository",
    "load_resume_file",
    # Errors
    "MalformedDocument",
]
