"""
Prompt adjustments for AI-generated suggestions.

The completion call itself lives outside this package; these helpers only
extend the prompt text with guidance learned from the user's edits.
"""

from typing import Optional

from resumeforge.contexts.feedback import ImprovementProfile

METRICS_GUIDANCE = (
    "IMPORTANT: Include specific numbers, percentages, and quantifiable achievements in your "
    "suggestions. Users prefer concrete metrics."
)
DETAIL_GUIDANCE = (
    "IMPORTANT: Provide detailed, comprehensive descriptions rather than brief summaries. "
    "Users tend to expand on suggestions."
)
LEADERSHIP_GUIDANCE = (
    "IMPORTANT: Emphasize leadership, management, and team collaboration aspects in your "
    "suggestions."
)
INDUSTRY_GUIDANCE = (
    "IMPORTANT: Focus specifically on {industry} industry terminology and requirements based "
    "on user editing patterns."
)


def improve_prompt(
    base_prompt: str, profile: ImprovementProfile, industry: Optional[str] = None
) -> str:
    """
    Append guidance paragraphs for each active improvement flag.

    Args:
        base_prompt: Prompt to extend
        profile: Learned improvement flags
        industry: Target industry; industry guidance is added only when the
                  profile is industry-specific and an industry is given

    Returns:
        The prompt, with one blank-line-separated paragraph per active flag

    Example:
        >>> improve_prompt("Suggest a summary.", ImprovementProfile(include_metrics=True))
        'Suggest a summary.\\n\\nIMPORTANT: Include specific numbers, ...'
    """
    paragraphs = [base_prompt]

    if profile.include_metrics:
        paragraphs.append(METRICS_GUIDANCE)
    if profile.expand_details:
        paragraphs.append(DETAIL_GUIDANCE)
    if profile.emphasize_leadership:
        paragraphs.append(LEADERSHIP_GUIDANCE)
    if profile.industry_specific and industry:
        paragraphs.append(INDUSTRY_GUIDANCE.format(industry=industry))

    return "\n\n".join(paragraphs)
