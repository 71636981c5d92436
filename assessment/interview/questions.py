from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from assessment.interview.errors import InvalidQuestionBankError, MissingKeywordsError


class Difficulty(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def rank(self) -> int:
        return _DIFFICULTY_ORDER.index(self)


_DIFFICULTY_ORDER = [Difficulty.BASIC, Difficulty.INTERMEDIATE, Difficulty.ADVANCED]


@dataclass(frozen=True)
class Question:
    id: int
    category: str
    difficulty: Difficulty
    text: str
    keywords: Tuple[str, ...]
    max_score: int  # informational only, never rescales the score


# ---------- STATIC QUESTION BANK ----------

QUESTION_BANK: Tuple[Question, ...] = (
    Question(
        id=1,
        category="Foundation",
        difficulty=Difficulty.BASIC,
        text=(
            "Can you explain the difference between a workbook and a worksheet in Excel? "
            "When would you use multiple worksheets?"
        ),
        keywords=("workbook", "worksheet", "tabs", "organize", "multiple", "sheets"),
        max_score=20,
    ),
    Question(
        id=2,
        category="Formulas",
        difficulty=Difficulty.INTERMEDIATE,
        text=(
            "How would you use VLOOKUP to find data across different sheets? "
            "Can you walk me through a practical example?"
        ),
        keywords=("vlookup", "lookup", "reference", "sheets", "table", "exact match", "approximate"),
        max_score=25,
    ),
    Question(
        id=3,
        category="Data Analysis",
        difficulty=Difficulty.INTERMEDIATE,
        text=(
            "Describe how you would create a pivot table to analyze sales data by region and month. "
            "What insights could this provide?"
        ),
        keywords=("pivot table", "analyze", "summarize", "region", "month", "insights", "data analysis"),
        max_score=25,
    ),
    Question(
        id=4,
        category="Problem Solving",
        difficulty=Difficulty.ADVANCED,
        text=(
            "You have a dataset with duplicate entries and inconsistent formatting. "
            "How would you clean this data efficiently?"
        ),
        keywords=("duplicate", "clean", "formatting", "remove duplicates", "standardize", "data quality"),
        max_score=25,
    ),
    Question(
        id=5,
        category="Advanced Analysis",
        difficulty=Difficulty.ADVANCED,
        text=(
            "How would you use conditional formatting and advanced formulas to create a dynamic "
            "dashboard that updates automatically?"
        ),
        keywords=(
            "conditional formatting",
            "dashboard",
            "dynamic",
            "automatic",
            "advanced formulas",
            "visualization",
        ),
        max_score=25,
    ),
)


def validate_question_bank(questions: Iterable[Question]) -> Tuple[Question, ...]:
    """
    Check the bank once at load time so scoring never sees a malformed question.
    Questions must have unique ids, at least one lowercase keyword, and
    non-decreasing difficulty in bank order.
    """
    items = tuple(questions or ())
    if not items:
        raise InvalidQuestionBankError("Question bank is empty")

    seen_ids = set()
    previous_rank = -1
    for question in items:
        if question.id in seen_ids:
            raise InvalidQuestionBankError(f"Duplicate question id: {question.id}")
        seen_ids.add(question.id)

        if not question.keywords:
            raise MissingKeywordsError(f"Question {question.id} has no keywords")
        for keyword in question.keywords:
            if not keyword.strip() or keyword != keyword.lower():
                raise InvalidQuestionBankError(
                    f"Question {question.id} keyword {keyword!r} must be non-blank lowercase"
                )

        rank = Difficulty(question.difficulty).rank
        if rank < previous_rank:
            raise InvalidQuestionBankError(
                f"Question {question.id} breaks difficulty ordering ({question.difficulty.value})"
            )
        previous_rank = rank

    return items


_VALIDATED_BANK = validate_question_bank(QUESTION_BANK)


def get_question_bank() -> Tuple[Question, ...]:
    return _VALIDATED_BANK
