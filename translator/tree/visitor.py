from translator.token import Token
from translator.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our AST
    """

    def visit(self, node: Node | Token, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_default)
        return visitor(node, *args, **kwargs)

    def visit_default(self, node: Node | Token, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        raise NotImplementedError(
            f"{self.__class__.__name__} cannot visit {node.__class__.__name__}"
        )
