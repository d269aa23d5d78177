"""
RESUMEFORGE - structured resume building with ATS feedback and suggestion learning

A domain-driven resume core: a structured document model, deterministic scoring,
and a feedback loop that learns from how users edit applied suggestions.

Architecture:
- Document Context: Resume document model and persistence
- Scoring Context: ATS compatibility and completeness scoring
- Feedback Context: Edit-event log, pattern mining and improvement profile
- Suggestions Context: Industry/role content suggestions biased by the profile
"""

__version__ = "0.1.0"
