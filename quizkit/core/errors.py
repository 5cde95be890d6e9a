class QuizkitError(Exception):
    """Базовий виняток бібліотеки."""


class QuestionNotFoundError(QuizkitError, LookupError):
    def __init__(self, question_id: int) -> None:
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id


class OptionIndexOutOfRangeError(QuizkitError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        # допустимі індекси: -1 (додати в кінець) або 0..length-1
        super().__init__(f"Option index {index} out of range for {length} option(s)")
        self.index = index
        self.length = length
