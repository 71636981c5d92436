from assessment.interview.evaluator import evaluate_response, keyword_hits
from assessment.interview.models import CandidateInfo, Evaluation, InterviewReport, ScoredResponse
from assessment.interview.questions import Difficulty, Question, get_question_bank
from assessment.interview.scorer import build_report, recommendation_for
from assessment.interview.session import EvaluationState, InterviewSession, SessionPhase

__all__ = [
    "CandidateInfo",
    "Difficulty",
    "Evaluation",
    "EvaluationState",
    "InterviewReport",
    "InterviewSession",
    "Question",
    "ScoredResponse",
    "SessionPhase",
    "build_report",
    "evaluate_response",
    "get_question_bank",
    "keyword_hits",
    "recommendation_for",
]
