"""
Resume completeness score.

A progress indicator for the editor, not an ATS grade. It weights sections
differently from the ATS score and gives proportional credit across all six
personal-info fields rather than the three contact fields.
"""

import math
from typing import Mapping, Union

from resumeforge.contexts.document import ResumeDocument
from resumeforge.utils.text_processing import count_non_blank, is_blank

COMPLETENESS_WEIGHTS = {
    "personal_info": 25,
    "summary": 15,
    "experience": 25,
    "education": 20,
    "skills": 10,
    "achievements": 5,
}


def completeness_score(document: Union[ResumeDocument, Mapping]) -> int:
    """
    Percentage of the resume that has been filled in.

    Args:
        document: ResumeDocument, or raw resume data accepted by ResumeDocument.from_dict

    Returns:
        Integer between 0 and 100

    Raises:
        MalformedDocument: If raw data lacks required nested structure
    """
    if not isinstance(document, ResumeDocument):
        document = ResumeDocument.from_dict(document)

    weights = COMPLETENESS_WEIGHTS
    personal_values = document.personal_info.values()
    score = (count_non_blank(personal_values) / len(personal_values)) * weights["personal_info"]

    if not is_blank(document.summary):
        score += weights["summary"]
    if document.experience:
        score += weights["experience"]
    if document.education:
        score += weights["education"]
    if document.skills:
        score += weights["skills"]
    if document.achievements:
        score += weights["achievements"]

    # Halves round up (12.5 -> 13)
    return int(math.floor(score + 0.5))
