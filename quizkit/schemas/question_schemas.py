from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ..domain.model import QuestionType


class QuestionIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    body: str = ""
    type: QuestionType
    options: List[str] = Field(default_factory=list)
    expected: str = ""
    points: int = Field(1, ge=0)
    published: bool = False


class QuestionOut(BaseModel):
    id: int
    name: str
    body: str
    type: QuestionType
    options: List[str]
    expected: str
    points: int
    published: bool


class AnswerOut(BaseModel):
    questionId: int
    text: str
    submitted: bool
    correct: bool
