from translator.error.communicator import Communicator, WarningRaiser
from translator.error.parser_error import ParseError, ParserException
from translator.scanner.scanner import Scanner
from translator.token import Token
from translator.type import Type

from translator.tree.tree import (  # isort:skip
    GroupNode,
    Node,
    NumNode,
    Op1Node,
    Op2Node,
    StmtAssNode,
    StmtListNode,
    VariableNode,
)

# The tokens that may start a factor, in the order the grammar tries them
FACTOR_STARTS = (Type.MINUS, Type.LRB, Type.NUM, Type.ID)


class Parser:
    """
    Recursive descent parser, with one method per rule of the grammar:

        program    -> statement* EOF
        statement  -> assignment ';'
        assignment -> id '=' exp
        exp        -> term (('+' | '-') term)*
        term       -> fact (('*' | '/') fact)*
        fact       -> '-' fact | '(' exp ')' | num | id

    The first syntax error raises a `ParserException` for the whole program.
    """

    def __init__(self) -> None:
        self.scanner = None

    def parse(self, program: str) -> StmtAssNode:
        """Parse exactly one statement from `program`. Any tokens after the
        statement are ignored, as are illegal characters among them.

        Args:
            program (str): The input program as a string.

        Returns:
            StmtAssNode: The root of the AST.
        """
        self.scanner = Scanner(program)
        self.scanner.next()
        tree = self.parse_stmt()

        # Matching the semicolon scanned one token ahead, whose illegal
        # characters belong to the unparsed rest of the program
        WarningRaiser.WARNINGS[:] = [
            warning
            for warning in WarningRaiser.WARNINGS
            if warning.program is not program or warning.span.start < tree.span.end
        ]

        # Report skipped illegal characters, if any
        Communicator.communicate(ParserException)
        return tree

    def parse_all(self, program: str) -> StmtListNode:
        """Parse all statements from `program`, up until the end of the input.

        Args:
            program (str): The input program as a string.

        Returns:
            StmtListNode: The root of the AST.
        """
        self.scanner = Scanner(program)
        self.scanner.next()
        body = []
        while self.scanner.curr().type != Type.EOF:
            body.append(self.parse_stmt())

        span = body[0].span & body[-1].span if body else self.scanner.curr().span
        Communicator.communicate(ParserException)
        return StmtListNode(body, span=span)

    def parse_stmt(self) -> StmtAssNode:
        stmt = self.parse_assignment()
        semicolon = self.scanner.match(Token.of(Type.SEMICOLON))
        stmt.span = stmt.span & semicolon.span
        return stmt

    def parse_assignment(self) -> StmtAssNode:
        id = self.scanner.match(Token.of(Type.ID))
        self.scanner.match(Token.of(Type.EQ))
        exp = self.parse_exp()
        return StmtAssNode(id, exp, span=id.span & exp.span)

    def parse_exp(self) -> Node:
        # Fold to the left for left-associativity, e.g. 1 - 2 - 3 is (1 - 2) - 3
        left = self.parse_term()
        while self.scanner.curr().type in (Type.PLUS, Type.MINUS):
            operator = self.scanner.match(self.scanner.curr())
            right = self.parse_term()
            left = Op2Node(left, operator, right, span=left.span & right.span)
        return left

    def parse_term(self) -> Node:
        left = self.parse_fact()
        while self.scanner.curr().type in (Type.STAR, Type.SLASH):
            operator = self.scanner.match(self.scanner.curr())
            right = self.parse_fact()
            left = Op2Node(left, operator, right, span=left.span & right.span)
        return left

    def parse_fact(self) -> Node:
        token = self.scanner.curr()
        match token.type:
            case Type.MINUS:
                operator = self.scanner.match(token)
                operand = self.parse_fact()
                return Op1Node(operator, operand, span=operator.span & operand.span)

            case Type.LRB:
                lrb = self.scanner.match(token)
                exp = self.parse_exp()
                rrb = self.scanner.match(Token.of(Type.RRB))
                return GroupNode(exp, span=lrb.span & rrb.span)

            case Type.NUM:
                self.scanner.match(token)
                return NumNode(token, span=token.span)

            case Type.ID:
                self.scanner.match(token)
                return VariableNode(token, span=token.span)

        ParseError(
            self.scanner.og_program,
            token.span,
            self.scanner.pos(),
            [Token.of(type) for type in FACTOR_STARTS],
            token,
        )
