"""
Base classes for the markdown abstract syntax tree.

Nodes own an ordered list of children and a back reference to their parent.
Visitors dispatch on the concrete node class name, so every node type gets its
own `visit_<ClassName>` handler.
"""

from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar('T', bound='ASTNode')


class ASTNode(Generic[T]):
    """Base class for all AST nodes."""

    def __init__(self) -> None:
        """Initialize a node with no parent and no children."""
        self.parent: Optional[T] = None
        self.children: List[T] = []

    def add_child(self, child: T) -> T:
        """
        Add a child node to the end of this node's children.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        child.parent = self  # type: ignore
        self.children.append(child)
        return child

    def add_children(self, children: List[T]) -> None:
        """
        Add several child nodes, preserving their order.

        Args:
            children: The child nodes to add
        """
        for child in children:
            self.add_child(child)


class ASTVisitor(Generic[T]):
    """
    Base visitor class for AST traversal.

    Subclasses implement `visit_<ClassName>` methods; nodes without a
    matching method go to `generic_visit`.
    """

    def visit(self, node: T) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: T) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        return [self.visit(child) for child in node.children]
