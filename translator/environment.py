from types import MappingProxyType
from typing import Dict, Mapping

from translator.error.evaluation_error import UndefinedVariableError
from translator.util import Span


class Environment:
    """Stores the values of variables, shared by all programs of one translation.

    Accessing a variable that was never assigned raises an `EvaluatorException`.
    """

    def __init__(self) -> None:
        self._variables: Dict[str, float] = {}

    @property
    def variables(self) -> Mapping[str, float]:
        return MappingProxyType(self._variables)

    def put(self, var: str, value: float) -> float:
        self._variables[var] = value
        return value

    def get(self, span: Span, var: str, program: str = "") -> float:
        if var not in self._variables:
            UndefinedVariableError(program, span, var)
        return self._variables[var]

    def to_c(self) -> str:
        """Declare every known variable as a C double, in order of first assignment.

        Returns:
            str: e.g. "double x,y;\\n", or an empty string if no variable exists.
        """
        if not self._variables:
            return ""
        return "double " + ",".join(self._variables) + ";\n"

    def __contains__(self, var: str) -> bool:
        return var in self._variables

    def __len__(self) -> int:
        return len(self._variables)
