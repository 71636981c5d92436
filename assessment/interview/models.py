from dataclasses import dataclass, asdict, field
from typing import Dict, List, Tuple

from assessment.interview.questions import Difficulty


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (0.5 -> 1, 2.5 -> 3)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


@dataclass(frozen=True)
class Evaluation:
    concept_score: float
    detail_score: float
    structure_score: float
    example_score: float
    keyword_matches: int
    total_keywords: int
    score: int

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "concept_score": round_half_up(self.concept_score),
            "detail_score": round_half_up(self.detail_score),
            "structure_score": round_half_up(self.structure_score),
            "example_score": round_half_up(self.example_score),
            "keyword_matches": self.keyword_matches,
            "total_keywords": self.total_keywords,
        }


@dataclass(frozen=True)
class ScoredResponse:
    question_id: int
    question_text: str
    answer_text: str
    category: str
    difficulty: Difficulty
    evaluation: Evaluation

    @property
    def score(self) -> int:
        return self.evaluation.score

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "question_text": self.question_text,
            "answer_text": self.answer_text,
            "category": self.category,
            "difficulty": Difficulty(self.difficulty).value,
            "evaluation": self.evaluation.to_dict(),
        }


@dataclass(frozen=True)
class CandidateInfo:
    name: str
    email: str
    position: str
    experience: str

    def missing_fields(self) -> List[str]:
        return [key for key, value in asdict(self).items() if not str(value or "").strip()]


@dataclass(frozen=True)
class InterviewReport:
    overall_score: int
    category_averages: Dict[str, int]
    difficulty_averages: Dict[str, int]
    strengths: List[str]
    improvements: List[str]
    recommendation: str
    responses: Tuple[ScoredResponse, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "category_averages": dict(self.category_averages),
            "difficulty_averages": dict(self.difficulty_averages),
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "recommendation": self.recommendation,
            "responses": [item.to_dict() for item in self.responses],
        }
