from dataclasses import dataclass
from typing import List

from translator.error.error import TranslatorException, UnrecoverableError
from translator.token import Token
from translator.type import Type


class ParserException(TranslatorException):
    pass


CLASS_TYPES = (Type.NUM, Type.ID, Type.EOF, Type.ANY, Type.EMPTY)


def describe(token: Token) -> str:
    # Tokens built with `Token.of` only know their kind, e.g. "a number"
    if token.type in CLASS_TYPES and token.text == token.type.value:
        return token.type.article_str()
    return repr(token.text)


@dataclass
class ParseError(UnrecoverableError):
    position: int
    expected: List[Token]
    got: Token

    stage = ParserException

    def __str__(self) -> str:
        options = [describe(token) for token in self.expected]
        if len(options) > 1:
            options = ", ".join(options[:-1]) + " or " + options[-1]
        else:
            options = options[0]
        return self.create_error(
            f"Expected {options}, but got {describe(self.got)} instead at position {self.position}.",
            class_name="SyntaxError",
        )
