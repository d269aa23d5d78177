"""
ATS Compatibility Scoring

Scores how well a resume would survive an Applicant Tracking System screen.
Points are awarded per section (weights sum to 100) and every decision emits a
human-readable diagnostic: a check (passed), a warning (could be improved) or
an error (missing required content).

Evaluation order, which is also the order of the diagnostics:
    contact -> summary -> experience -> education -> skills -> achievements -> word count
"""

from dataclasses import dataclass
from typing import List, Mapping, Tuple, Union

from resumeforge.contexts.document import ResumeDocument
from resumeforge.contexts.document.resume_data_structure import CONTACT_FIELDS
from resumeforge.contexts.scoring.logger import log_score_result
from resumeforge.utils.text_processing import count_non_blank, count_words, is_blank

CONTACT_POINTS = 20
SUMMARY_POINTS = 15
SHORT_SUMMARY_POINTS = 7
EXPERIENCE_POINTS = 15
DETAILED_EXPERIENCE_POINTS = 10
EDUCATION_POINTS = 15
SKILLS_POINTS = 15
FEW_SKILLS_POINTS = 8
ACHIEVEMENTS_POINTS = 10

MIN_SUMMARY_CHARS = 50
MIN_DETAILED_DESCRIPTION_CHARS = 100  # strictly greater than
MIN_SKILLS = 5
MIN_TOTAL_WORDS = 200

GOOD_SCORE = 80
FAIR_SCORE = 60


@dataclass(frozen=True)
class ScoreResult:
    """
    Result of scoring a resume.

    Attributes:
        score: Integer score between 0 and 100
        checks: Passed checks, in evaluation order
        warnings: Suggested improvements, in evaluation order
        errors: Missing required content, in evaluation order
        total_words: Words across summary, experience descriptions and achievements
    """

    score: int
    checks: Tuple[str, ...]
    warnings: Tuple[str, ...]
    errors: Tuple[str, ...]
    total_words: int

    @property
    def band(self) -> str:
        return score_band(self.score)


class _Diagnostics:
    """Accumulates points and diagnostics while scoring."""

    def __init__(self):
        self.points = 0.0
        self.checks: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []


def _score_contact(document: ResumeDocument, diag: _Diagnostics) -> None:
    filled = count_non_blank(document.personal_info.values(CONTACT_FIELDS))
    diag.points += (filled / len(CONTACT_FIELDS)) * CONTACT_POINTS

    if filled == len(CONTACT_FIELDS):
        diag.checks.append("Complete contact information")
    else:
        diag.warnings.append("Missing contact information fields")


def _score_summary(document: ResumeDocument, diag: _Diagnostics) -> None:
    if is_blank(document.summary):
        diag.errors.append("Missing professional summary")
    elif len(document.summary) >= MIN_SUMMARY_CHARS:
        diag.points += SUMMARY_POINTS
        diag.checks.append("Professional summary included")
    else:
        diag.points += SHORT_SUMMARY_POINTS
        diag.warnings.append("Professional summary too short (50+ characters recommended)")


def _score_experience(document: ResumeDocument, diag: _Diagnostics) -> None:
    if not document.experience:
        diag.errors.append("No work experience added")
        return

    diag.points += EXPERIENCE_POINTS
    diag.checks.append("Work experience included")

    # Full credit as soon as any single entry is detailed
    if any(len(entry.description) > MIN_DETAILED_DESCRIPTION_CHARS for entry in document.experience):
        diag.points += DETAILED_EXPERIENCE_POINTS
        diag.checks.append("Detailed job descriptions")
    else:
        diag.warnings.append("Add more detailed job descriptions")


def _score_education(document: ResumeDocument, diag: _Diagnostics) -> None:
    if document.education:
        diag.points += EDUCATION_POINTS
        diag.checks.append("Education information included")
    else:
        diag.warnings.append("Consider adding education information")


def _score_skills(document: ResumeDocument, diag: _Diagnostics) -> None:
    if len(document.skills) >= MIN_SKILLS:
        diag.points += SKILLS_POINTS
        diag.checks.append("Comprehensive skills list (5+ skills)")
    elif document.skills:
        diag.points += FEW_SKILLS_POINTS
        diag.warnings.append("Add more relevant skills (5+ recommended)")
    else:
        diag.errors.append("No skills listed")


def _score_achievements(document: ResumeDocument, diag: _Diagnostics) -> None:
    if document.achievements:
        diag.points += ACHIEVEMENTS_POINTS
        diag.checks.append("Key achievements highlighted")
    else:
        diag.warnings.append("Consider adding key achievements")


def _check_word_count(document: ResumeDocument, diag: _Diagnostics) -> int:
    total_words = count_words(
        document.summary,
        *(entry.description for entry in document.experience),
        *document.achievements,
    )
    if total_words >= MIN_TOTAL_WORDS:
        diag.checks.append("Adequate content length")
    else:
        diag.warnings.append("Resume may be too brief (200+ words recommended)")
    return total_words


SECTION_SCORERS = (
    _score_contact,
    _score_summary,
    _score_experience,
    _score_education,
    _score_skills,
    _score_achievements,
)


def score_resume(document: Union[ResumeDocument, Mapping]) -> ScoreResult:
    """
    Compute the ATS compatibility score of a resume.

    Pure and deterministic: scoring the same document twice gives equal results.

    Args:
        document: ResumeDocument, or raw resume data accepted by ResumeDocument.from_dict

    Returns:
        ScoreResult with score, diagnostics and total word count

    Raises:
        MalformedDocument: If raw data lacks required nested structure

    Example:
        >>> result = score_resume(ResumeDocument.empty())
        >>> result.score, result.errors
        (0, ('Missing professional summary', 'No work experience added', 'No skills listed'))
    """
    if not isinstance(document, ResumeDocument):
        document = ResumeDocument.from_dict(document)

    diag = _Diagnostics()
    for scorer in SECTION_SCORERS:
        scorer(document, diag)
    total_words = _check_word_count(document, diag)

    result = ScoreResult(
        score=int(round(diag.points)),
        checks=tuple(diag.checks),
        warnings=tuple(diag.warnings),
        errors=tuple(diag.errors),
        total_words=total_words,
    )
    log_score_result(result)
    return result


def score_band(score: int) -> str:
    """
    Classify a score for display.

    Returns:
        "good" (80+), "fair" (60-79) or "poor" (below 60)
    """
    if score >= GOOD_SCORE:
        return "good"
    if score >= FAIR_SCORE:
        return "fair"
    return "poor"
