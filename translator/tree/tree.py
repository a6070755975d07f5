from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from translator.token import Token
from translator.util import Span

if TYPE_CHECKING:
    from translator.environment import Environment


@dataclass
class Node:
    span: Span = field(
        repr=False, kw_only=True, compare=False, default_factory=Span.default
    )

    def evaluate(self, environment: Environment) -> float:
        from translator.evaluation.evaluator import Evaluator

        return Evaluator(environment).visit(self)

    def generate_code(self) -> str:
        from translator.generation.generator import Generator

        return Generator().visit(self)

    def __str__(self) -> str:
        return self.generate_code()


@dataclass
class NumNode(Node):
    token: Token


@dataclass
class VariableNode(Node):
    id: Token


@dataclass
class Op1Node(Node):
    operator: Token
    operand: Node


@dataclass
class Op2Node(Node):
    left: Node
    operator: Token
    right: Node


# An expression between parentheses, as written in the program
@dataclass
class GroupNode(Node):
    exp: Node


@dataclass
class StmtAssNode(Node):
    id: Token
    exp: Node


@dataclass
class StmtListNode(Node):
    body: List[StmtAssNode]
