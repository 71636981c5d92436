import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EVALUATION_DELAY_SEC", "0")
    monkeypatch.setattr("assessment.interview.session.EVALUATION_DELAY_SEC", 0.0)


@pytest.fixture
def candidate():
    from assessment.interview.models import CandidateInfo

    return CandidateInfo(
        name="Dana Reyes",
        email="dana@example.com",
        position="Data Analyst",
        experience="3-5 years",
    )


@pytest.fixture
def rich_answer() -> str:
    from assessment.interview.questions import get_question_bank

    keywords = " ".join(k for q in get_question_bank() for k in q.keywords)
    return (
        f"For example, I would cover {keywords}. "
        "This keeps the workbook tidy and the analysis easy to audit for the whole team."
    )
