"""
Content Suggestion Generator

Builds summary, skill and achievement suggestions for an (industry, role) pair
from a static catalog, then adjusts them according to the ImprovementProfile
learned from the user's past edits.

The generator only reads the profile. Edits of applied suggestions flow back to
the feedback context through the feedback sink passed in at construction
(typically FeedbackTracker.record).

Usage:
    tracker = FeedbackTracker(JsonLinesFeedbackRepository())
    generator = SuggestionGenerator(feedback_sink=tracker.record)

    suggestions = generator.suggest("finance", "mid", tracker.improvement_profile)
    applied = generator.apply("summary", suggestions.summaries[0], "finance", "mid")
    applied.track_edit(edited_text)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumeforge.contexts.feedback import EDIT_TYPES, ImprovementProfile
from resumeforge.contexts.feedback.pattern_analyzer import LEADERSHIP_TERMS
from resumeforge.utils.text_processing import contains_digits

load_dotenv()
DEFAULT_CATALOG_PATH = Path(__file__).parent / "suggestion_catalog.yaml"
SUGGESTION_CATALOG_PATH = Path(os.getenv("SUGGESTION_CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))

MAX_SUMMARIES = 3
SHORT_SUMMARY_CHARS = 150
DEFAULT_EXPERIENCE_YEARS = "10+"

METRICS_PHRASE = ("proven expertise", "proven expertise with 95% success rate")
DETAIL_SENTENCE = (
    " Experienced in stakeholder management, project delivery, and driving measurable"
    " business outcomes."
)
LEADERSHIP_PHRASE = ("Successfully", "Successfully led initiatives that")

FeedbackSink = Callable[..., Any]


def load_suggestion_catalog(config_path: Path = None) -> Dict[str, Any]:
    """
    Load the suggestion catalog YAML as plain dicts and lists.

    Args:
        config_path: Optional path to catalog (defaults to SUGGESTION_CATALOG_PATH env variable)
    """
    if config_path is None:
        config_path = SUGGESTION_CATALOG_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


@dataclass(frozen=True)
class Suggestions:
    """Suggested content for one (industry, role) pair."""

    summaries: Tuple[str, ...]
    skills: Tuple[str, ...]
    achievements: Tuple[str, ...]
    certifications: Tuple[str, ...] = ()
    job_titles: Tuple[str, ...] = ()


@dataclass
class AppliedSuggestion:
    """
    A suggestion the user applied to their resume.

    Call track_edit() with the text the user ended up with; a changed text is
    reported to the feedback sink.
    """

    content: str
    type: str
    industry: Optional[str] = None
    role: Optional[str] = None
    feedback_sink: Optional[FeedbackSink] = field(default=None, repr=False)

    def track_edit(self, edited_content: str) -> bool:
        """
        Report the user's edit of this suggestion.

        Returns:
            True if the edit differed from the suggestion and was forwarded
        """
        if edited_content == self.content or self.feedback_sink is None:
            return False
        self.feedback_sink(
            self.content,
            edited_content,
            self.type,
            industry=self.industry,
            role=self.role,
        )
        return True


class SuggestionGenerator:
    """
    Generates profile-biased content suggestions from a static catalog.

    Attributes:
        catalog: Parsed suggestion catalog
    """

    def __init__(self, feedback_sink: FeedbackSink = None, catalog: Dict[str, Any] = None):
        """
        Args:
            feedback_sink: Called as sink(original, edited, type, industry=..., role=...)
                           when an applied suggestion is edited
            catalog: Parsed catalog (default: load_suggestion_catalog())
        """
        self.catalog = catalog if catalog is not None else load_suggestion_catalog()
        self._feedback_sink = feedback_sink

    def _industry_profile(self, industry: str) -> Optional[Dict[str, Any]]:
        return self.catalog["industries"].get(industry)

    def _base_skills(self, industry: str) -> List[str]:
        skills_by_field = self.catalog["skills_by_field"]
        return list(skills_by_field.get(industry, skills_by_field[self.catalog["default_skills_field"]]))

    def _base_achievements(self, role: str) -> List[str]:
        achievements = self.catalog["achievements"]
        return list(achievements.get(role, achievements[self.catalog["default_role"]]))

    def _role_summary(self, industry: str, role: str, profile: Optional[Dict[str, Any]]) -> str:
        years = self.catalog["experience_years"].get(role, DEFAULT_EXPERIENCE_YEARS)
        if profile:
            top_skills = ", ".join(profile["skills"][:3])
            return f"Experienced {role}-level {industry} professional with {years} years of expertise in {top_skills}."
        return f"Dynamic {role}-level professional with {years} years of experience delivering exceptional results in {industry}."

    def suggest(
        self,
        industry: str = "",
        role: str = "",
        profile: ImprovementProfile = ImprovementProfile(),
    ) -> Suggestions:
        """
        Build suggestions for an industry and role.

        Args:
            industry: Industry name (e.g., "finance"); unknown industries fall back
                      to generic summaries and field-level skill lists
            role: Seniority ("entry", "mid", "senior", "executive")
            profile: Learned improvement flags

        Returns:
            Suggestions with at most three summaries
        """
        industry = industry.strip().lower()
        role = role.strip().lower()
        industry_profile = self._industry_profile(industry)

        if industry_profile:
            summaries = [industry_profile["sample_summary"]]
            skills = list(industry_profile["skills"])
            certifications = list(industry_profile["certifications"])
            job_titles = list(industry_profile["job_titles"])
        else:
            summaries = list(self.catalog["summaries"])
            skills = self._base_skills(industry)
            certifications = []
            job_titles = []
        achievements = self._base_achievements(role)

        if profile.include_metrics:
            summaries = [s if contains_digits(s) else s.replace(*METRICS_PHRASE, 1) for s in summaries]

        if profile.expand_details:
            summaries = [s + DETAIL_SENTENCE if len(s) < SHORT_SUMMARY_CHARS else s for s in summaries]

        if profile.emphasize_leadership:
            achievements = [
                a if _mentions_leadership(a) else a.replace(*LEADERSHIP_PHRASE, 1)
                for a in achievements
            ]

        if industry and role:
            summaries.append(self._role_summary(industry, role, industry_profile))

        return Suggestions(
            summaries=tuple(summaries[:MAX_SUMMARIES]),
            skills=tuple(skills),
            achievements=tuple(achievements),
            certifications=tuple(certifications),
            job_titles=tuple(job_titles),
        )

    def apply(
        self, type: str, content: str, industry: str = None, role: str = None
    ) -> AppliedSuggestion:
        """
        Mark a suggestion as applied and return a handle for tracking edits.

        Raises:
            ValueError: If ``type`` is not a known edit type
        """
        if type not in EDIT_TYPES:
            raise ValueError(f"Unknown suggestion type '{type}'. Expected one of {list(EDIT_TYPES)}")
        return AppliedSuggestion(
            content=content,
            type=type,
            industry=industry or None,
            role=role or None,
            feedback_sink=self._feedback_sink,
        )


def _mentions_leadership(text: str) -> bool:
    text = text.lower()
    return any(term in text for term in LEADERSHIP_TERMS)
