import asyncio
import logging
import uuid
from enum import Enum
from typing import Awaitable, Callable, Iterable, List, Optional

from assessment.core.config import EVALUATION_DELAY_SEC, EVALUATION_TIMEOUT_SEC
from assessment.core.logger import log_event
from assessment.interview.errors import (
    EmptyInputError,
    IncompleteCandidateError,
    InterviewCompleteError,
    InterviewIncompleteError,
    InterviewNotStartedError,
    SubmissionInFlightError,
)
from assessment.interview.evaluator import evaluate_response
from assessment.interview.models import CandidateInfo, Evaluation, InterviewReport, ScoredResponse
from assessment.interview.questions import Question, get_question_bank, validate_question_bank
from assessment.interview.scorer import build_report

logger = logging.getLogger("assessment.interview.session")

EvaluateFn = Callable[[str, Question], Awaitable[Evaluation]]


class SessionPhase(str, Enum):
    INTRODUCTION = "introduction"
    INTERVIEW = "interview"
    REPORT = "report"


class EvaluationState(str, Enum):
    IDLE = "idle"
    EVALUATING = "evaluating"
    COMPLETE = "complete"


class InterviewSession:
    """
    Holds the answers of ONE candidate, in question order.

    `submit` is single-flight: while an answer is being evaluated the
    session reports EVALUATING and rejects further submissions.
    """

    def __init__(
        self,
        questions: Optional[Iterable[Question]] = None,
        evaluation_delay_sec: Optional[float] = None,
        evaluate_fn: Optional[EvaluateFn] = None,
        evaluation_timeout_sec: Optional[float] = None,
        session_id: Optional[str] = None,
    ):
        self.session_id: str = session_id or str(uuid.uuid4())
        self.questions = get_question_bank() if questions is None else validate_question_bank(questions)

        self.evaluation_delay_sec = EVALUATION_DELAY_SEC if evaluation_delay_sec is None else max(0.0, float(evaluation_delay_sec))
        self.evaluation_timeout_sec = EVALUATION_TIMEOUT_SEC if evaluation_timeout_sec is None else float(evaluation_timeout_sec)
        self.evaluate_fn = evaluate_fn

        self.candidate: Optional[CandidateInfo] = None
        self.phase = SessionPhase.INTRODUCTION
        self.evaluation_state = EvaluationState.IDLE
        self.responses: List[ScoredResponse] = []
        self.cursor: int = 0

        self._lock = asyncio.Lock()
        self._in_flight = False
        self._report: Optional[InterviewReport] = None

    # -------------------------
    # LIFECYCLE
    # -------------------------

    def start(self, candidate: CandidateInfo) -> Optional[Question]:
        missing = candidate.missing_fields()
        if missing:
            raise IncompleteCandidateError(f"Missing candidate fields: {', '.join(missing)}")
        if self.phase != SessionPhase.INTRODUCTION:
            return self.current_question()

        self.candidate = candidate
        self.phase = SessionPhase.INTERVIEW
        log_event(
            "interview_session",
            "started",
            self.session_id,
            position=candidate.position,
            question_count=len(self.questions),
        )
        return self.current_question()

    def current_question(self) -> Optional[Question]:
        if self.cursor >= len(self.questions):
            return None
        return self.questions[self.cursor]

    def is_complete(self) -> bool:
        return self.cursor >= len(self.questions)

    @property
    def is_evaluating(self) -> bool:
        return self.evaluation_state == EvaluationState.EVALUATING

    def progress_percent(self) -> int:
        """Position of the question on screen: question 1 of 5 is 20%."""
        if self.phase == SessionPhase.INTRODUCTION:
            return 0
        shown = min(self.cursor + 1, len(self.questions))
        return int((shown / len(self.questions)) * 100)

    # -------------------------
    # SUBMISSION
    # -------------------------

    async def submit(self, answer_text: str) -> ScoredResponse:
        if not str(answer_text or "").strip():
            raise EmptyInputError("Answer text is empty")

        async with self._lock:
            if self.phase == SessionPhase.INTRODUCTION:
                raise InterviewNotStartedError("Interview has not been started")
            if self._in_flight:
                raise SubmissionInFlightError("An answer is already being evaluated")
            question = self.current_question()
            if question is None:
                raise InterviewCompleteError("All questions have been answered")

            self._in_flight = True
            self.evaluation_state = EvaluationState.EVALUATING

        try:
            evaluation = await self._evaluate(answer_text, question)
            response = ScoredResponse(
                question_id=question.id,
                question_text=question.text,
                answer_text=answer_text,
                category=question.category,
                difficulty=question.difficulty,
                evaluation=evaluation,
            )

            async with self._lock:
                responses = self.responses + [response]
                report = build_report(responses) if len(responses) >= len(self.questions) else None

                # nothing above mutates the session
                self.responses = responses
                self.cursor += 1
                if report is not None:
                    self._report = report
                    self.phase = SessionPhase.REPORT
                    self.evaluation_state = EvaluationState.COMPLETE
        finally:
            self._in_flight = False
            if self.evaluation_state == EvaluationState.EVALUATING:
                self.evaluation_state = EvaluationState.IDLE

        log_event(
            "interview_session",
            "answer_evaluated",
            self.session_id,
            question_id=question.id,
            answer=answer_text,
            score=evaluation.score,
            keyword_matches=evaluation.keyword_matches,
            cursor=self.cursor,
        )
        return response

    async def _evaluate(self, answer_text: str, question: Question) -> Evaluation:
        if self.evaluate_fn is None:
            await asyncio.sleep(self.evaluation_delay_sec)
            return evaluate_response(answer_text, question)

        try:
            result = await asyncio.wait_for(
                self.evaluate_fn(answer_text, question),
                timeout=self.evaluation_timeout_sec,
            )
            if _is_well_formed(result, question):
                return result
            logger.warning(
                "evaluate_fn malformed result | session=%s question=%s type=%s",
                self.session_id,
                question.id,
                type(result).__name__,
            )
        except asyncio.TimeoutError:
            logger.warning("evaluate_fn timeout | session=%s question=%s", self.session_id, question.id)
        except Exception as exc:
            logger.warning("evaluate_fn failure | session=%s question=%s err=%s", self.session_id, question.id, exc)

        log_event("interview_session", "evaluation_fallback", self.session_id, question_id=question.id)
        return evaluate_response(answer_text, question)

    # -------------------------
    # REPORT
    # -------------------------

    def report(self) -> InterviewReport:
        if self._report is None:
            raise InterviewIncompleteError(
                f"Interview incomplete: {self.cursor} of {len(self.questions)} answered"
            )
        return self._report

    def snapshot(self) -> dict:
        question = self.current_question()
        return {
            "session_id": self.session_id,
            "phase": self.phase.value,
            "evaluation_state": self.evaluation_state.value,
            "question_index": self.cursor,
            "question_count": len(self.questions),
            "progress_percent": self.progress_percent(),
            "current_question": question_payload(question),
        }


def question_payload(question: Optional[Question]) -> Optional[dict]:
    if question is None:
        return None
    return {
        "id": question.id,
        "category": question.category,
        "difficulty": question.difficulty.value,
        "text": question.text,
    }


def _is_well_formed(evaluation, question: Question) -> bool:
    if not isinstance(evaluation, Evaluation):
        return False
    scores = (
        evaluation.concept_score,
        evaluation.detail_score,
        evaluation.structure_score,
        evaluation.example_score,
        evaluation.score,
    )
    if not all(isinstance(value, (int, float)) and 0 <= value <= 100 for value in scores):
        return False
    if evaluation.total_keywords != len(question.keywords):
        return False
    return 0 <= evaluation.keyword_matches <= evaluation.total_keywords
