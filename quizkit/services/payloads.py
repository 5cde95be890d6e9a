from typing import Any, Iterable, List

from ..domain.model import Answer, Question
from ..schemas.question_schemas import AnswerOut, QuestionIn, QuestionOut


def question_from_payload(data: dict[str, Any]) -> Question:
    """Валідує dict (наприклад, з JSON) і будує доменне питання. Помилки -> pydantic.ValidationError."""
    q = QuestionIn.model_validate(data)
    return Question(
        id=q.id,
        name=q.name,
        body=q.body,
        type=q.type,
        options=list(q.options),
        expected=q.expected,
        points=q.points,
        published=q.published,
    )


def questions_from_payload(items: Iterable[dict[str, Any]]) -> List[Question]:
    return [question_from_payload(i) for i in items]


def question_to_payload(question: Question) -> dict:
    return QuestionOut(
        id=question.id,
        name=question.name,
        body=question.body,
        type=question.type,
        options=list(question.options),
        expected=question.expected,
        points=question.points,
        published=question.published,
    ).model_dump(mode="json")


def questions_to_payload(questions: Iterable[Question]) -> list[dict]:
    return [question_to_payload(q) for q in questions]


def answers_to_payload(answers: Iterable[Answer]) -> list[dict]:
    return [
        AnswerOut(
            questionId=a.question_id,
            text=a.text,
            submitted=a.submitted,
            correct=a.correct,
        ).model_dump()
        for a in answers
    ]
