from string import ascii_letters, digits
from typing import AbstractSet, Dict, List

from translator.error.communicator import Communicator
from translator.error.parser_error import ParseError
from translator.error.scanner_error import IllegalCharacterWarning, ScannerException
from translator.token import Token
from translator.type import Type
from translator.util import Span

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset(digits)
LETTERS = frozenset(ascii_letters)
LEGITS = LETTERS | DIGITS

# No keywords yet, e.g. {"print": Type.PRINT}
KEYWORDS: Dict[str, Type] = {}

# Two-character operators such as "==" may be added here, the scanner
# already tries those before falling back to a single character.
OPERATORS: Dict[str, Type] = {
    "=": Type.EQ,
    "+": Type.PLUS,
    "-": Type.MINUS,
    "*": Type.STAR,
    "/": Type.SLASH,
    "(": Type.LRB,
    ")": Type.RRB,
    ";": Type.SEMICOLON,
}


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program
        # Index of the next character in the program
        self.position = 0
        # Last scanned token
        self.token = None

    def done(self) -> bool:
        return self.position >= len(self.og_program)

    def pos(self) -> int:
        return self.position

    def many(self, characters: AbstractSet[str]) -> None:
        while not self.done() and self.og_program[self.position] in characters:
            self.position += 1

    def past(self, character: str) -> None:
        while not self.done() and self.og_program[self.position] != character:
            self.position += 1
        if not self.done():
            self.position += 1

    def next_number(self) -> None:
        start = self.position
        self.many(DIGITS)
        if not self.done() and self.og_program[self.position] == ".":
            self.position += 1
            self.many(DIGITS)
        self.token = Token(
            self.og_program[start : self.position],
            Type.NUM,
            Span(start, self.position),
        )

    def next_kw_id(self) -> None:
        start = self.position
        self.many(LETTERS)
        self.many(LEGITS)
        lexeme = self.og_program[start : self.position]
        self.token = Token(
            lexeme, KEYWORDS.get(lexeme, Type.ID), Span(start, self.position)
        )

    def next_op(self) -> None:
        start = self.position
        for length in (2, 1):
            lexeme = self.og_program[start : start + length]
            if len(lexeme) == length and lexeme in OPERATORS:
                self.position = start + length
                self.token = Token(lexeme, OPERATORS[lexeme], Span(start, self.position))
                return

    def next(self) -> bool:
        """Scan the next token, which is then available through `curr()`.

        Whitespace and `//` comments are skipped. Characters that cannot start
        a token are reported as an `IllegalCharacterWarning` and skipped, so
        scanning always continues up until the end of the program.

        Returns:
            bool: False if the end of the program was reached, and the current
                token is now EOF. True otherwise.
        """
        while True:
            self.many(WHITESPACE)

            if self.og_program.startswith("//", self.position):
                self.past("\n")
                continue

            if self.done():
                self.token = Token.of(Type.EOF, Span(self.position, self.position))
                return False

            character = self.og_program[self.position]
            if character in DIGITS:
                self.next_number()
            elif character in LETTERS:
                self.next_kw_id()
            elif character in OPERATORS:
                self.next_op()
            else:
                IllegalCharacterWarning(
                    self.og_program, Span(self.position, self.position + 1)
                )
                self.position += 1
                continue
            return True

    def curr(self) -> Token:
        if self.token is None:
            ParseError(
                self.og_program,
                Span(self.position, self.position),
                self.position,
                [Token.of(Type.ANY)],
                Token.of(Type.EMPTY),
            )
        return self.token

    def match(self, expected: Token) -> Token:
        """Consume the current token if it is of the same kind as `expected`.

        Args:
            expected (Token): The token the grammar requires at this point.

        Returns:
            Token: The consumed token.
        """
        token = self.curr()
        if not expected.matches(token):
            ParseError(self.og_program, token.span, self.position, [expected], token)
        self.next()
        return token

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        Returns:
            List[Token]: A list of Token instances, excluding the final EOF.
        """
        tokens = []
        while self.next():
            tokens.append(self.token)

        # Report the illegal characters, if any, that were skipped
        Communicator.communicate(ScannerException)
        return tokens
