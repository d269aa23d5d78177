"""Unit tests for profile-biased content suggestions."""

import pytest

from resumeforge.contexts.feedback import AnalysisStatus, FeedbackTracker, ImprovementProfile
from resumeforge.contexts.suggestions import (
    AppliedSuggestion,
    SuggestionGenerator,
    improve_prompt,
    load_suggestion_catalog,
)
from resumeforge.contexts.suggestions.generator import (
    DETAIL_SENTENCE,
    MAX_SUMMARIES,
    SHORT_SUMMARY_CHARS,
)


@pytest.fixture(scope="module")
def catalog():
    return load_suggestion_catalog()


@pytest.fixture
def generator(catalog):
    return SuggestionGenerator(catalog=catalog)


class TestSuggest:
    """Suggestions without profile bias."""

    @pytest.mark.unit
    def test_known_industry(self, generator, catalog):
        suggestions = generator.suggest("Finance", " mid ")
        finance = catalog["industries"]["finance"]

        assert suggestions.summaries == (
            finance["sample_summary"],
            "Experienced mid-level finance professional with 3-5 years of expertise in "
            "Budgeting, Financial Modeling, Forecasting.",
        )
        assert suggestions.skills == tuple(finance["skills"])
        assert suggestions.certifications == ("CPA", "CFA", "MBA Finance")
        assert suggestions.achievements == tuple(catalog["achievements"]["mid"])

    @pytest.mark.unit
    def test_unknown_industry_falls_back_to_generic_content(self, generator, catalog):
        suggestions = generator.suggest("healthcare", "senior")

        assert len(suggestions.summaries) == MAX_SUMMARIES
        assert suggestions.summaries == tuple(catalog["summaries"])
        assert suggestions.skills == tuple(catalog["skills_by_field"]["healthcare"])
        assert suggestions.certifications == ()

    @pytest.mark.unit
    def test_defaults_without_industry_or_role(self, generator, catalog):
        suggestions = generator.suggest()

        assert suggestions.skills == tuple(catalog["skills_by_field"]["technology"])
        assert suggestions.achievements == tuple(catalog["achievements"]["entry"])

    @pytest.mark.unit
    def test_unknown_role_uses_default_years(self, generator):
        summaries = generator.suggest("marketing", "principal").summaries
        assert "10+ years" in summaries[-1]


class TestProfileBias:
    """Improvement flags change the generated text."""

    @pytest.mark.unit
    def test_include_metrics(self, generator):
        plain = generator.suggest()
        biased = generator.suggest(profile=ImprovementProfile(include_metrics=True))

        assert biased.summaries[0] == plain.summaries[0].replace(
            "proven expertise", "proven expertise with 95% success rate"
        )
        assert biased.summaries[1:] == plain.summaries[1:]

    @pytest.mark.unit
    def test_include_metrics_skips_summaries_with_numbers(self, generator):
        plain = generator.suggest("nursing")
        biased = generator.suggest("nursing", profile=ImprovementProfile(include_metrics=True))
        assert biased.summaries == plain.summaries

    @pytest.mark.unit
    def test_expand_details_only_extends_short_summaries(self, generator):
        plain = generator.suggest("software engineering")
        biased = generator.suggest(
            "software engineering", profile=ImprovementProfile(expand_details=True)
        )

        for before, after in zip(plain.summaries, biased.summaries):
            if len(before) < SHORT_SUMMARY_CHARS:
                assert after == before + DETAIL_SENTENCE
            else:
                assert after == before

    @pytest.mark.unit
    def test_emphasize_leadership(self, generator, catalog):
        profile = ImprovementProfile(emphasize_leadership=True)

        entry = generator.suggest(role="entry", profile=profile).achievements
        assert entry[0] == (
            "Successfully led initiatives that completed comprehensive training program "
            "ahead of schedule"
        )
        assert entry[1:] == tuple(catalog["achievements"]["entry"][1:])

        # Already mentions leadership
        mid = generator.suggest(role="mid", profile=profile).achievements
        assert mid == tuple(catalog["achievements"]["mid"])


class TestAppliedSuggestions:
    """Edits of applied suggestions reach the feedback sink."""

    @pytest.mark.unit
    def test_changed_edit_is_forwarded(self, catalog):
        calls = []
        generator = SuggestionGenerator(
            feedback_sink=lambda *args, **kwargs: calls.append((args, kwargs)), catalog=catalog
        )

        applied = generator.apply("summary", "Ran a team", industry="finance", role="mid")

        assert isinstance(applied, AppliedSuggestion)
        assert applied.track_edit("Ran a team") is False
        assert applied.track_edit("Led a team of 5") is True
        assert calls == [
            (("Ran a team", "Led a team of 5", "summary"), {"industry": "finance", "role": "mid"})
        ]

    @pytest.mark.unit
    def test_no_sink_means_no_tracking(self, generator):
        assert generator.apply("skill", "Python").track_edit("Python 3") is False

    @pytest.mark.unit
    def test_unknown_type_rejected(self, generator):
        with pytest.raises(ValueError, match="Unknown suggestion type"):
            generator.apply("headline", "Engineer")

    @pytest.mark.unit
    def test_tracker_as_sink_closes_the_loop(self, catalog, fake_clock):
        tracker = FeedbackTracker(clock=fake_clock)
        generator = SuggestionGenerator(feedback_sink=tracker.record, catalog=catalog)

        for original in ("Improved sales", "Cut costs", "Grew revenue"):
            generator.apply("achievement", original, "finance", "mid").track_edit(f"{original} by 20%")

        assert tracker.event_count == 3
        assert tracker.events[0].industry == "finance"
        assert tracker.analyze(force=True).status is AnalysisStatus.COMPLETED

        biased = generator.suggest(profile=tracker.improvement_profile)
        assert "95% success rate" in biased.summaries[0]


class TestImprovePrompt:
    """Prompt guidance follows the profile."""

    @pytest.mark.unit
    def test_inactive_profile_leaves_prompt_unchanged(self):
        assert improve_prompt("Suggest a summary.", ImprovementProfile()) == "Suggest a summary."

    @pytest.mark.unit
    def test_paragraph_per_flag(self):
        profile = ImprovementProfile(include_metrics=True, emphasize_leadership=True)
        paragraphs = improve_prompt("Suggest a summary.", profile).split("\n\n")

        assert paragraphs[0] == "Suggest a summary."
        assert len(paragraphs) == 3
        assert "quantifiable achievements" in paragraphs[1]
        assert "leadership" in paragraphs[2]

    @pytest.mark.unit
    def test_industry_guidance_needs_industry(self):
        profile = ImprovementProfile(industry_specific=True)

        assert improve_prompt("P", profile) == "P"
        assert "finance industry terminology" in improve_prompt("P", profile, industry="finance")
