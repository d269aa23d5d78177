"""
Scoring Context

Responsibilities:
- Computes the ATS compatibility score with pass/warn/fail diagnostics
- Computes the resume completeness score shown as editor progress

Owns: Scoring weights and thresholds, diagnostic wording
Never: Modifies resume documents or performs I/O
"""

from resumeforge.contexts.scoring.ats_scorer import ScoreResult, score_band, score_resume
from resumeforge.contexts.scoring.completeness import COMPLETENESS_WEIGHTS, completeness_score
from resumeforge.contexts.scoring.report import format_score_report

__all__ = [
    "score_resume",
    "score_band",
    "ScoreResult",
    "completeness_score",
    "COMPLETENESS_WEIGHTS",
    "format_score_report",
]
