from dataclasses import dataclass

from translator.error.communicator import Communicator, WarningRaiser
from translator.util import Colors, Span


@dataclass
class Warning:
    program: str
    span: Span

    def __post_init__(self) -> None:
        WarningRaiser.WARNINGS.append(self)

    def create_message(self, before: str, after: str = "", n_after=1) -> str:
        return Communicator.create_message(
            self.program, self.span, "Warning", before, after, 1, n_after, Colors.YELLOW
        )
