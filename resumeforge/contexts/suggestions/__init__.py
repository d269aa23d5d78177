"""
Suggestions Context

Responsibilities:
- Generates summary, skill and achievement suggestions per industry and role
- Biases suggestions and AI prompts using the learned ImprovementProfile
- Hands edits of applied suggestions to an injected feedback sink

Owns: Suggestion catalog, suggestion biasing rules
Never: Mutates feedback state directly or calls remote models
"""

from resumeforge.contexts.suggestions.generator import (
    AppliedSuggestion,
    SuggestionGenerator,
    Suggestions,
    load_suggestion_catalog,
)
from resumeforge.contexts.suggestions.prompts import improve_prompt

__all__ = [
    "SuggestionGenerator",
    "Suggestions",
    "AppliedSuggestion",
    "load_suggestion_catalog",
    "improve_prompt",
]
