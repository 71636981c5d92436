from dataclasses import replace

import pytest

from assessment.interview.errors import InvalidQuestionBankError, MissingKeywordsError
from assessment.interview.questions import Difficulty, get_question_bank, validate_question_bank


def test_reference_bank_shape():
    bank = get_question_bank()
    assert [q.id for q in bank] == [1, 2, 3, 4, 5]
    assert {q.category for q in bank} == {
        "Foundation",
        "Formulas",
        "Data Analysis",
        "Problem Solving",
        "Advanced Analysis",
    }
    assert {q.difficulty for q in bank} == set(Difficulty)
    assert all(q.keywords for q in bank)


def test_difficulty_is_ordered():
    assert Difficulty.BASIC.rank < Difficulty.INTERMEDIATE.rank < Difficulty.ADVANCED.rank


def test_duplicate_ids_rejected():
    bank = get_question_bank()
    with pytest.raises(InvalidQuestionBankError):
        validate_question_bank([bank[0], replace(bank[1], id=bank[0].id)])


def test_missing_keywords_rejected():
    bank = get_question_bank()
    with pytest.raises(MissingKeywordsError):
        validate_question_bank([replace(bank[0], keywords=())])


def test_uppercase_keyword_rejected():
    bank = get_question_bank()
    with pytest.raises(InvalidQuestionBankError):
        validate_question_bank([replace(bank[0], keywords=("Workbook",))])


def test_difficulty_must_not_decrease():
    bank = get_question_bank()
    with pytest.raises(InvalidQuestionBankError):
        validate_question_bank([bank[4], bank[0]])


def test_empty_bank_rejected():
    with pytest.raises(InvalidQuestionBankError):
        validate_question_bank([])
