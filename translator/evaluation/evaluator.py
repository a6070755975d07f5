import math

from translator.environment import Environment
from translator.error.evaluation_error import UnevaluableNodeError
from translator.tree.visitor import NodeVisitor
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


def divide(left: float, right: float) -> float:
    # IEEE 754 division, Python itself raises ZeroDivisionError
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Evaluator(NodeVisitor):
    def __init__(self, environment: Environment, program: str = "") -> None:
        self.environment = environment
        # Only used to point at the source in error messages
        self.program = program

    def visit_NumNode(self, node: NumNode) -> float:
        return float(node.token.text)

    def visit_VariableNode(self, node: VariableNode) -> float:
        return self.environment.get(node.span, node.id.text, self.program)

    def visit_GroupNode(self, node: GroupNode) -> float:
        return self.visit(node.exp)

    def visit_Op1Node(self, node: Op1Node) -> float:
        match node.operator.type:
            case Type.MINUS:
                return -self.visit(node.operand)
        return self.visit_default(node)

    def visit_Op2Node(self, node: Op2Node) -> float:
        left = self.visit(node.left)
        right = self.visit(node.right)
        match node.operator.type:
            case Type.PLUS:
                return left + right
            case Type.MINUS:
                return left - right
            case Type.STAR:
                return left * right
            case Type.SLASH:
                return divide(left, right)
        return self.visit_default(node)

    def visit_StmtAssNode(self, node: StmtAssNode) -> float:
        value = self.visit(node.exp)
        return self.environment.put(node.id.text, value)

    def visit_StmtListNode(self, node: StmtListNode) -> float:
        value = 0.0
        for stmt in node.body:
            value = self.visit(stmt)
        return value

    def visit_default(self, node: Node) -> float:
        UnevaluableNodeError(self.program, node.span, node.__class__.__name__)
