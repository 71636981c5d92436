import logging
from typing import List

from assessment.interview.errors import MissingKeywordsError
from assessment.interview.models import Evaluation, round_half_up
from assessment.interview.questions import Question
from assessment.interview import rules

logger = logging.getLogger("assessment.interview.evaluator")


def _tokenize(text: str) -> List[str]:
    # whitespace-only split never yields an empty token, unlike a regex split on padded text;
    # an empty token would otherwise match every keyword
    return (text or "").lower().split()


def keyword_hits(answer_text: str, question: Question) -> List[str]:
    """
    Keywords of `question` matched by at least one answer token.

    Matching is bidirectional substring containment: a token containing the
    keyword, or the keyword containing the token ("lookup" hits "vlookup",
    "pivot" hits "pivot table").
    """
    tokens = _tokenize(answer_text)
    hits = []
    for keyword in question.keywords:
        needle = keyword.lower()
        if any(needle in token or token in needle for token in tokens):
            hits.append(keyword)
    return hits


def _concept_score(matches: int, total: int) -> float:
    return min(100.0, (matches / total) * 100.0)


def _detail_score(answer_text: str) -> float:
    return min(100.0, (len(answer_text) / rules.DETAIL_FULL_CREDIT_CHARS) * 100.0)


def _structure_score(answer_text: str) -> float:
    if any(marker in answer_text for marker in rules.STRUCTURE_MARKERS):
        return float(rules.STRUCTURE_SCORE_PRESENT)
    return float(rules.STRUCTURE_SCORE_ABSENT)


def _example_score(answer_text: str) -> float:
    lowered = answer_text.lower()
    if any(marker in lowered for marker in rules.EXAMPLE_MARKERS):
        return float(rules.EXAMPLE_SCORE_PRESENT)
    return float(rules.EXAMPLE_SCORE_ABSENT)


def evaluate_response(answer_text: str, question: Question) -> Evaluation:
    """
    Score one free-text answer against one question.

    Pure and deterministic. Blank answers are not rejected here; callers
    validate input before scoring.
    """
    total_keywords = len(question.keywords)
    if total_keywords == 0:
        raise MissingKeywordsError(f"Question {question.id} has no keywords")

    answer_text = answer_text or ""
    matches = len(keyword_hits(answer_text, question))

    concept = _concept_score(matches, total_keywords)
    detail = _detail_score(answer_text)
    structure = _structure_score(answer_text)
    example = _example_score(answer_text)

    composite = (
        rules.WEIGHT_CONCEPT * concept
        + rules.WEIGHT_DETAIL * detail
        + rules.WEIGHT_STRUCTURE * structure
        + rules.WEIGHT_EXAMPLE * example
    )

    evaluation = Evaluation(
        concept_score=concept,
        detail_score=detail,
        structure_score=structure,
        example_score=example,
        keyword_matches=matches,
        total_keywords=total_keywords,
        score=round_half_up(composite),
    )
    logger.debug(
        "evaluate_response | question=%s matches=%s/%s score=%s",
        question.id,
        matches,
        total_keywords,
        evaluation.score,
    )
    return evaluation
