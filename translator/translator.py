import sys
from typing import Iterable

from icecream import ic

from translator.environment import Environment
from translator.error.communicator import Communicator
from translator.error.error import TranslatorException
from translator.evaluation.evaluator import Evaluator
from translator.generation.code import Code
from translator.parser.parser import Parser
from translator.tree.tree import Node
from translator.util import Span


class Translator:
    """Translate independent programs that share one environment, so that a
    variable assigned in one program may be used in all programs after it."""

    def __init__(self, debug: bool = False) -> None:
        self.parser = Parser()
        self.environment = Environment()
        self.code = ""
        self.debug = debug

    def translate(self, program: str, full: bool = False) -> bool:
        """Parse, evaluate and generate code for one program.

        Errors are printed to stderr instead of raised, so a batch of programs
        continues after a faulty one.

        Args:
            program (str): The input program as a string.
            full (bool, optional): Parse every statement rather than only the
                first. Defaults to False.

        Returns:
            bool: Whether the program was translated without errors.
        """
        if self.debug:
            ic(program)
        stage = "SyntaxError"
        try:
            tree = self.parser.parse_all(program) if full else self.parser.parse(program)
            if self.debug:
                ic(tree)
            stage = "EvaluationError"
            # Statements before a failing one keep their effect and their code
            for stmt in tree.body if full else [tree]:
                value = Evaluator(self.environment, program).visit(stmt)
                if self.debug:
                    ic(value)
                self.append(stmt)
        except TranslatorException as e:
            print(e, file=sys.stderr)
            return False
        except RecursionError:
            message = Communicator.create_message(
                program, Span.default(), stage, "The program is nested too deeply."
            )
            print(message, file=sys.stderr)
            return False

        return True

    def translate_all(self, programs: Iterable[str]) -> int:
        return sum(not self.translate(program) for program in programs)

    def translate_file(self, filename: str) -> bool:
        with open(filename, "r", encoding="utf8") as f:
            return self.translate(f.read(), full=True)

    def append(self, tree: Node) -> None:
        fragment = tree.generate_code()
        if self.debug:
            ic(fragment)
        if fragment:
            self.code += fragment + "\n"

    def output(self) -> Code:
        return Code(self.code, self.environment)
