import pytest
from pydantic import ValidationError

from quizkit.domain.model import Answer, Question, QuestionType
from quizkit.services.payloads import (
    answers_to_payload,
    question_from_payload,
    question_to_payload,
    questions_from_payload,
    questions_to_payload,
)

PAYLOAD = {
    "id": 5,
    "name": "Colors",
    "body": "Which of these is a color?",
    "type": "multiple_choice_question",
    "options": ["red", "apple", "firetruck"],
    "expected": "red",
    "points": 1,
    "published": True,
}


def test_question_from_payload():
    q = question_from_payload(PAYLOAD)
    assert q.type is QuestionType.MULTIPLE_CHOICE
    assert q.options == ["red", "apple", "firetruck"]
    assert q.options is not PAYLOAD["options"]


def test_question_from_payload_defaults():
    q = question_from_payload({"id": 1, "name": "Blank", "type": "short_answer_question"})
    assert q == Question(id=1, name="Blank", body="", type=QuestionType.SHORT_ANSWER)


@pytest.mark.parametrize(
    "patch",
    [
        {"type": "essay_question"},
        {"points": -1},
        {"unexpected": "field"},
    ],
)
def test_question_from_payload_rejects_bad_input(patch):
    with pytest.raises(ValidationError):
        question_from_payload({**PAYLOAD, **patch})


def test_questions_to_payload_renders_type_tag():
    qs = questions_from_payload([PAYLOAD])
    assert questions_to_payload(qs) == [PAYLOAD]
    assert question_to_payload(qs[0])["type"] == "multiple_choice_question"


def test_answers_to_payload_uses_camel_case():
    assert answers_to_payload([Answer(question_id=3, text="red", submitted=True)]) == [
        {"questionId": 3, "text": "red", "submitted": True, "correct": False}
    ]
