import logging
from typing import Dict, List, Sequence

from assessment.interview.errors import EmptyReportInputError
from assessment.interview.models import InterviewReport, ScoredResponse, round_half_up
from assessment.interview.questions import Difficulty
from assessment.interview import rules

logger = logging.getLogger("assessment.interview.scorer")


def _average(scores: List[int]) -> int:
    return round_half_up(sum(scores) / len(scores))


def _grouped_averages(groups: Dict[str, List[int]]) -> Dict[str, int]:
    # dicts keep first-seen insertion order
    return {label: _average(scores) for label, scores in groups.items()}


def recommendation_for(overall_score: int) -> str:
    for lower_bound, label in rules.RECOMMENDATION_TIERS:
        if overall_score >= lower_bound:
            return label
    return rules.RECOMMENDATION_NOT_RECOMMENDED


def classify_categories(category_averages: Dict[str, int]):
    strengths = []
    improvements = []
    for category, average in category_averages.items():
        if average >= rules.STRENGTH_THRESHOLD:
            strengths.append(category)
        elif average < rules.IMPROVEMENT_THRESHOLD:
            improvements.append(category)
    return strengths, improvements


def build_report(responses: Sequence[ScoredResponse]) -> InterviewReport:
    items = tuple(responses or ())
    if not items:
        raise EmptyReportInputError("Cannot build a report from zero responses")

    by_category: Dict[str, List[int]] = {}
    by_difficulty: Dict[str, List[int]] = {}
    for item in items:
        by_category.setdefault(item.category, []).append(item.score)
        by_difficulty.setdefault(Difficulty(item.difficulty).value, []).append(item.score)

    category_averages = _grouped_averages(by_category)
    difficulty_averages = _grouped_averages(by_difficulty)
    overall_score = _average([item.score for item in items])
    strengths, improvements = classify_categories(category_averages)
    recommendation = recommendation_for(overall_score)

    logger.info(
        "build_report | responses=%s overall=%s recommendation=%s",
        len(items),
        overall_score,
        recommendation,
    )

    return InterviewReport(
        overall_score=overall_score,
        category_averages=category_averages,
        difficulty_averages=difficulty_averages,
        strengths=strengths,
        improvements=improvements,
        recommendation=recommendation,
        responses=items,
    )
