from dataclasses import dataclass

from translator.error.error import TranslatorException, UnrecoverableError


class EvaluatorException(TranslatorException):
    pass


class EvaluationError(UnrecoverableError):
    stage = EvaluatorException

    def create_error(self, before: str, after=""):
        return super().create_error(before, after, class_name="EvaluationError")


@dataclass
class UndefinedVariableError(EvaluationError):
    variable: str

    def __str__(self) -> str:
        return self.create_error(
            f"Undefined variable: {self.variable!r} at {self.span.position_str}."
        )


@dataclass
class UnevaluableNodeError(EvaluationError):
    node_name: str

    def __str__(self) -> str:
        return self.create_error(
            f"Cannot evaluate a {self.node_name} at {self.span.position_str}."
        )
