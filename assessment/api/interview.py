from fastapi import APIRouter, HTTPException

from assessment.interview.errors import (
    EmptyInputError,
    IncompleteCandidateError,
    InterviewCompleteError,
    InterviewIncompleteError,
    InterviewNotStartedError,
    SubmissionInFlightError,
)
from assessment.interview.models import CandidateInfo
from assessment.interview.questions import get_question_bank
from assessment.interview.session import InterviewSession, question_payload
from assessment.schemas import (
    AnswerRequest,
    AnswerResponse,
    CandidateRequest,
    QuestionOut,
    ReportOut,
    SessionStatusResponse,
    StartInterviewResponse,
)
from assessment.session.registry import session_registry

router = APIRouter()


def _require_session(session_id: str) -> InterviewSession:
    session = session_registry.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    session_registry.touch(session_id)
    return session


@router.get("/questions", response_model=list[QuestionOut])
def list_questions():
    return [question_payload(q) for q in get_question_bank()]


@router.post("/interview/start", response_model=StartInterviewResponse)
def start_interview(payload: CandidateRequest):
    session = InterviewSession()
    try:
        first_question = session.start(CandidateInfo(**payload.model_dump()))
    except IncompleteCandidateError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    session_registry.register(session)
    return {
        "session_id": session.session_id,
        "question_count": len(session.questions),
        "current_question": question_payload(first_question),
    }


@router.get("/interview/{session_id}", response_model=SessionStatusResponse)
def get_interview_status(session_id: str):
    return _require_session(session_id).snapshot()


@router.post("/interview/{session_id}/answer", response_model=AnswerResponse)
async def submit_answer(session_id: str, payload: AnswerRequest):
    session = _require_session(session_id)

    try:
        response = await session.submit(payload.answer)
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except (SubmissionInFlightError, InterviewCompleteError, InterviewNotStartedError) as exc:
        raise HTTPException(status_code=409, detail=str(exc))

    complete = session.is_complete()
    if complete:
        session_registry.mark_finished(session_id)

    return {
        "response": response.to_dict(),
        "complete": complete,
        "progress_percent": session.progress_percent(),
        "next_question": question_payload(session.current_question()),
        "report": session.report().to_dict() if complete else None,
    }


@router.get("/interview/{session_id}/report", response_model=ReportOut)
def get_report(session_id: str):
    session = _require_session(session_id)
    try:
        return session.report().to_dict()
    except InterviewIncompleteError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
