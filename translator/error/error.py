from dataclasses import dataclass, field
from typing import List

from translator.error.communicator import Communicator, ErrorRaiser
from translator.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class TranslatorException(Exception):
    def __init__(self, message: str, errors: List = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


@dataclass
class TranslatorError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="TranslatorError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        return self.program[self.span.start : self.span.end]


class UnrecoverableError(TranslatorError):
    stage = TranslatorException

    # Add the error to the list, and immediately raise it
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)
        Communicator.communicate(self.stage)
