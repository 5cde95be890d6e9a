from typing import List, Optional

from loguru import logger

from ..core.errors import QuestionNotFoundError
from ..domain.model import Answer, Question, QuestionType
from .questions import (
    clone_question,
    duplicate_question,
    edit_question,
    make_blank_question,
    rename_question,
)

CSV_HEADER = "id,name,options,points,published"


def get_published_questions(questions: List[Question]) -> List[Question]:
    return [clone_question(q) for q in questions if q.published]


def get_non_empty_questions(questions: List[Question]) -> List[Question]:
    return [clone_question(q) for q in questions if q.body or q.expected or q.options]


def find_question(questions: List[Question], id: int) -> Optional[Question]:
    for q in questions:
        if q.id == id:
            return clone_question(q)
    return None


def remove_question(questions: List[Question], id: int) -> List[Question]:
    # id вважається унікальним, тож прибираються всі збіги
    return [clone_question(q) for q in questions if q.id != id]


def get_names(questions: List[Question]) -> List[str]:
    return [q.name for q in questions]


def sum_points(questions: List[Question]) -> int:
    return sum(q.points for q in questions)


def sum_published_points(questions: List[Question]) -> int:
    return sum(q.points for q in questions if q.published)


def _csv_bool(value: bool) -> str:
    return "true" if value else "false"


def to_csv(questions: List[Question]) -> str:
    """
    Заголовок, далі по рядку на питання; options пишеться як кількість.
    Значення не екрануються, у кінці немає переносу рядка.
    """
    rows = [CSV_HEADER]
    for q in questions:
        rows.append(f"{q.id},{q.name},{len(q.options)},{q.points},{_csv_bool(q.published)}")
    return "\n".join(rows)


def make_answers(questions: List[Question]) -> List[Answer]:
    return [Answer(question_id=q.id, text="", submitted=False, correct=False) for q in questions]


def publish_all(questions: List[Question]) -> List[Question]:
    return [q.replace(published=True) for q in questions]


def same_type(questions: List[Question]) -> bool:
    # порожній список: вважаємо, що всі питання одного типу
    if not questions:
        return True
    first = questions[0].type
    return all(q.type == first for q in questions)


def add_new_question(
    questions: List[Question],
    id: int,
    name: str,
    type: QuestionType,
) -> List[Question]:
    return [*(clone_question(q) for q in questions), make_blank_question(id, name, type)]


def _log_missing(operation: str, target_id: int) -> None:
    logger.warning(f"[{operation}] question id={target_id} not found, nothing changed")


def rename_question_by_id(
    questions: List[Question],
    target_id: int,
    new_name: str,
) -> List[Question]:
    result: List[Question] = []
    found = False
    for q in questions:
        if q.id == target_id:
            found = True
            result.append(rename_question(q, new_name))
        else:
            result.append(clone_question(q))
    if not found:
        _log_missing("rename", target_id)
    return result


def change_question_type_by_id(
    questions: List[Question],
    target_id: int,
    new_type: QuestionType,
) -> List[Question]:
    """
    Змінює тип питання target_id. Якщо новий тип не multiple choice,
    options очищаються: варіанти мають сенс лише для multiple choice.
    """
    result: List[Question] = []
    found = False
    for q in questions:
        if q.id != target_id:
            result.append(clone_question(q))
            continue
        found = True
        if new_type == QuestionType.MULTIPLE_CHOICE:
            result.append(q.replace(type=new_type))
        else:
            result.append(q.replace(type=new_type, options=[]))
        logger.debug(f"[change_type] id={target_id} {QuestionType(q.type).value} -> {QuestionType(new_type).value}")
    if not found:
        _log_missing("change_type", target_id)
    return result


def edit_option(
    questions: List[Question],
    target_id: int,
    target_option_index: int,
    new_option: str,
) -> List[Question]:
    result: List[Question] = []
    found = False
    for q in questions:
        if q.id == target_id:
            found = True
            result.append(edit_question(q, target_option_index, new_option))
        else:
            result.append(clone_question(q))
    if not found:
        _log_missing("edit_option", target_id)
    return result


def duplicate_question_in_array(
    questions: List[Question],
    target_id: int,
    new_id: int,
) -> List[Question]:
    """Вставляє копію питання target_id одразу після нього; без збігу - QuestionNotFoundError."""
    index = next((i for i, q in enumerate(questions) if q.id == target_id), None)
    if index is None:
        raise QuestionNotFoundError(target_id)

    result = [clone_question(q) for q in questions]
    result.insert(index + 1, duplicate_question(new_id, questions[index]))
    logger.debug(f"[duplicate] id={target_id} -> new id={new_id} at position {index + 1}")
    return result
