from translator.tree.visitor import NodeVisitor

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


def attach(operator: str, operand: str) -> str:
    # Never emit "--", which C reads as a decrement
    if operator == "-" and operand.startswith("-"):
        return f"{operator} {operand}"
    return operator + operand


class Generator(NodeVisitor):
    """
    Render an AST as C code. Operator precedence is given by the shape of the
    tree, so no parentheses are added beyond those written in the program.
    """

    def visit_NumNode(self, node: NumNode) -> str:
        return node.token.text

    def visit_VariableNode(self, node: VariableNode) -> str:
        return node.id.text

    def visit_GroupNode(self, node: GroupNode) -> str:
        return f"({self.visit(node.exp)})"

    def visit_Op1Node(self, node: Op1Node) -> str:
        return attach(node.operator.text, self.visit(node.operand))

    def visit_Op2Node(self, node: Op2Node) -> str:
        return self.visit(node.left) + attach(
            node.operator.text, self.visit(node.right)
        )

    def visit_StmtAssNode(self, node: StmtAssNode) -> str:
        return f"{node.id.text} = {self.visit(node.exp)};"

    def visit_StmtListNode(self, node: StmtListNode) -> str:
        return "\n".join(self.visit(stmt) for stmt in node.body)

    def visit_default(self, node: Node) -> str:
        return ""
