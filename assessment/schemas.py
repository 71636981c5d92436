from pydantic import BaseModel


class CandidateRequest(BaseModel):
    name: str
    email: str
    position: str
    experience: str


class AnswerRequest(BaseModel):
    answer: str


class QuestionOut(BaseModel):
    id: int
    category: str
    difficulty: str
    text: str


class StartInterviewResponse(BaseModel):
    session_id: str
    question_count: int
    current_question: QuestionOut | None = None


class EvaluationOut(BaseModel):
    score: int
    concept_score: int
    detail_score: int
    structure_score: int
    example_score: int
    keyword_matches: int
    total_keywords: int


class ScoredResponseOut(BaseModel):
    question_id: int
    question_text: str
    answer_text: str
    category: str
    difficulty: str
    evaluation: EvaluationOut


class ReportOut(BaseModel):
    overall_score: int
    category_averages: dict[str, int]
    difficulty_averages: dict[str, int]
    strengths: list[str]
    improvements: list[str]
    recommendation: str
    responses: list[ScoredResponseOut]


class SessionStatusResponse(BaseModel):
    session_id: str
    phase: str
    evaluation_state: str
    question_index: int
    question_count: int
    progress_percent: int
    current_question: QuestionOut | None = None


class AnswerResponse(BaseModel):
    response: ScoredResponseOut
    complete: bool
    progress_percent: int
    next_question: QuestionOut | None = None
    report: ReportOut | None = None
