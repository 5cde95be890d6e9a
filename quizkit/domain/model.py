from dataclasses import dataclass, field, replace as _replace
from enum import Enum
from typing import Any, List


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice_question"
    SHORT_ANSWER = "short_answer_question"


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class Question:
    """
    Поля заморожені, але options - звичайний list: змінювати питання слід лише через replace().
    Через list питання не хешується (не можна класти в set чи використовувати як ключ dict).
    """

    id: int
    name: str
    body: str
    type: QuestionType
    options: List[str] = field(default_factory=list)
    expected: str = ""
    points: int = 1
    published: bool = False

    def replace(self, **changes: Any) -> "Question":
        """Нова копія питання зі зміненими полями; options завжди копіюються."""
        options = changes.pop("options", self.options)
        return _replace(self, options=list(options), **changes)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Answer:
    question_id: int
    text: str = ""
    submitted: bool = False
    correct: bool = False
