from resume_screener.scoring.factory import ScoringClientFactory
from resume_screener.scoring.interpreter import interpret
from resume_screener.scoring.models import AnalysisResult
from resume_screener.scoring.scorer import ResumeScorer

__all__ = ["AnalysisResult", "ResumeScorer", "ScoringClientFactory", "interpret"]
