from typing import Protocol

from ..core.errors import OptionIndexOutOfRangeError
from ..domain.model import Question, QuestionType

DEFAULT_POINTS = 1
SHORT_FORM_NAME_LENGTH = 10
DUPLICATE_NAME_PREFIX = "Copy of "


class HasPoints(Protocol):
    points: int


def make_blank_question(id: int, name: str, type: QuestionType) -> Question:
    return Question(
        id=id,
        name=name,
        body="",
        type=type,
        options=[],
        expected="",
        points=DEFAULT_POINTS,
        published=False,
    )


def clone_question(question: Question) -> Question:
    return question.replace()


def is_correct(question: Question, answer: str) -> bool:
    """Порівняння без урахування регістру та пробілів по краях."""
    return answer.strip().lower() == question.expected.strip().lower()


def is_valid(question: Question, answer: str) -> bool:
    """
    Для short answer підходить будь-яка відповідь,
    для multiple choice - лише точний збіг з одним з options.
    """
    if question.type == QuestionType.SHORT_ANSWER:
        return True
    if question.type == QuestionType.MULTIPLE_CHOICE:
        return answer in question.options
    raise ValueError(f"Unknown question type: {question.type!r}")


def to_short_form(question: Question) -> str:
    return f"{question.id}: {question.name[:SHORT_FORM_NAME_LENGTH]}"


def to_markdown(question: Question) -> str:
    lines = [f"# {question.name}", question.body]
    if question.type == QuestionType.MULTIPLE_CHOICE:
        lines.extend(f"- {option}" for option in question.options)
    return "\n".join(lines)


def rename_question(question: Question, new_name: str) -> Question:
    return question.replace(name=new_name)


def publish_question(question: Question) -> Question:
    # інвертує, а не просто вмикає
    return question.replace(published=not question.published)


def duplicate_question(new_id: int, original: Question) -> Question:
    return original.replace(
        id=new_id,
        name=f"{DUPLICATE_NAME_PREFIX}{original.name}",
        published=False,
    )


def add_option(question: Question, new_option: str) -> Question:
    return question.replace(options=[*question.options, new_option])


def merge_question(
    new_id: int,
    new_name: str,
    content_question: Question,
    points_source: HasPoints,
) -> Question:
    return content_question.replace(
        id=new_id,
        name=new_name,
        published=False,
        points=points_source.points,
    )


def edit_question(question: Question, target_option_index: int, new_option: str) -> Question:
    """
    -1 додає new_option в кінець, інший індекс замінює наявний елемент.
    Індекси поза [-1, len(options) - 1] -> OptionIndexOutOfRangeError.
    """
    options = list(question.options)
    if target_option_index == -1:
        options.append(new_option)
    elif 0 <= target_option_index < len(options):
        options[target_option_index] = new_option
    else:
        raise OptionIndexOutOfRangeError(target_option_index, len(options))
    return question.replace(options=options)
