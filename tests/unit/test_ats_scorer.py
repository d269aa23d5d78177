"""Unit tests for ATS compatibility scoring."""

import dataclasses

import pytest

from resumeforge.contexts.document import (
    EducationEntry,
    ExperienceEntry,
    MalformedDocument,
    PersonalInfo,
    ResumeDocument,
)
from resumeforge.contexts.scoring import ScoreResult, score_band, score_resume


@pytest.mark.unit
def test_full_resume_scores_100(full_resume):
    """A resume above every threshold gets full marks and no errors."""
    result = score_resume(full_resume)

    assert result.score == 100
    assert result.errors == ()
    assert result.warnings == ()
    assert result.total_words >= 200
    assert result.checks == (
        "Complete contact information",
        "Professional summary included",
        "Work experience included",
        "Detailed job descriptions",
        "Education information included",
        "Comprehensive skills list (5+ skills)",
        "Key achievements highlighted",
        "Adequate content length",
    )


@pytest.mark.unit
def test_empty_resume_scores_0():
    """An empty resume errors on summary, experience and skills only."""
    result = score_resume(ResumeDocument.empty())

    assert result.score == 0
    assert result.total_words == 0
    assert result.checks == ()
    assert result.errors == (
        "Missing professional summary",
        "No work experience added",
        "No skills listed",
    )
    assert result.warnings == (
        "Missing contact information fields",
        "Consider adding education information",
        "Consider adding key achievements",
        "Resume may be too brief (200+ words recommended)",
    )


@pytest.mark.unit
def test_accepts_raw_mapping(full_resume_data):
    """Raw persisted data is converted before scoring."""
    assert score_resume(full_resume_data).score == 100


@pytest.mark.unit
def test_malformed_mapping_raises():
    with pytest.raises(MalformedDocument):
        score_resume({"summary": "No personal info here"})


@pytest.mark.unit
def test_contact_score_is_monotonic():
    """Each additional contact field never lowers the score."""
    fields = ["full_name", "email", "phone"]
    scores = []
    for filled in range(len(fields) + 1):
        info = PersonalInfo(**{name: "x" for name in fields[:filled]})
        scores.append(score_resume(ResumeDocument(personal_info=info)).score)

    assert scores == [0, 7, 13, 20]
    assert scores == sorted(scores)


@pytest.mark.unit
def test_whitespace_contact_fields_count_as_blank():
    info = PersonalInfo(full_name="  ", email="\t", phone="555-0100")
    result = score_resume(ResumeDocument(personal_info=info))

    assert result.score == 7
    assert "Missing contact information fields" in result.warnings


@pytest.mark.unit
@pytest.mark.parametrize(
    "summary, points, diagnostic",
    [
        ("x" * 50, 15, "Professional summary included"),
        ("Too short.", 7, "Professional summary too short (50+ characters recommended)"),
        ("", 0, "Missing professional summary"),
        ("   ", 0, "Missing professional summary"),
        (" " * 60, 0, "Missing professional summary"),
    ],
)
def test_summary_scoring(summary, points, diagnostic):
    result = score_resume(ResumeDocument(summary=summary))

    assert result.score == points
    assert diagnostic in result.checks + result.warnings + result.errors


@pytest.mark.unit
def test_experience_without_detail_gets_partial_credit():
    document = ResumeDocument(experience=[ExperienceEntry(description="x" * 100)])
    result = score_resume(document)

    assert result.score == 15
    assert "Work experience included" in result.checks
    assert "Add more detailed job descriptions" in result.warnings


@pytest.mark.unit
def test_one_detailed_description_gives_full_experience_credit():
    """Detail credit is all-or-nothing: one long description is enough."""
    document = ResumeDocument(
        experience=[
            ExperienceEntry(description="short"),
            ExperienceEntry(description="x" * 101),
            ExperienceEntry(description=""),
        ]
    )
    result = score_resume(document)

    assert result.score == 25
    assert "Detailed job descriptions" in result.checks


@pytest.mark.unit
@pytest.mark.parametrize(
    "skills, points",
    [([], 0), (["Python"], 8), (["a", "b", "c", "d"], 8), (["a", "b", "c", "d", "e"], 15)],
)
def test_skills_scoring(skills, points):
    assert score_resume(ResumeDocument(skills=skills)).score == points


@pytest.mark.unit
def test_missing_education_and_achievements_are_warnings_only():
    result = score_resume(ResumeDocument())

    assert "Consider adding education information" in result.warnings
    assert "Consider adding key achievements" in result.warnings
    assert not any("education" in e.lower() or "achievement" in e.lower() for e in result.errors)


@pytest.mark.unit
def test_education_and_achievements_points():
    document = ResumeDocument(education=[EducationEntry()], achievements=["Shipped v2"])
    assert score_resume(document).score == 25


@pytest.mark.unit
def test_word_count_ignores_achievement_order():
    achievements = ["Grew revenue 20%", "Led   migration to Kubernetes", "Won\tinternal hackathon"]
    forward = score_resume(ResumeDocument(summary="Engineer.", achievements=achievements))
    backward = score_resume(
        ResumeDocument(summary="Engineer.", achievements=list(reversed(achievements)))
    )

    assert forward.total_words == backward.total_words == 11


@pytest.mark.unit
def test_word_count_threshold_is_200():
    at_threshold = score_resume(ResumeDocument(summary=" ".join(["word"] * 200)))
    below = score_resume(ResumeDocument(summary=" ".join(["word"] * 199)))

    assert "Adequate content length" in at_threshold.checks
    assert "Resume may be too brief (200+ words recommended)" in below.warnings


@pytest.mark.unit
def test_scoring_is_idempotent(full_resume):
    first = score_resume(full_resume)
    second = score_resume(full_resume)

    assert first == second
    assert dataclasses.astuple(first) == dataclasses.astuple(second)


@pytest.mark.unit
def test_score_result_is_immutable(full_resume):
    result = score_resume(full_resume)
    assert isinstance(result, ScoreResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 0


@pytest.mark.unit
@pytest.mark.parametrize("score, band", [(100, "good"), (80, "good"), (79, "fair"), (60, "fair"), (59, "poor"), (0, "poor")])
def test_score_band(score, band):
    assert score_band(score) == band
