"""
Base Extractor

Tree traversal helpers shared by syntax-tree extractors.
"""

from typing import Optional

from tree_sitter import Node


class SyntaxExtractor:
    """
    Base class for tree-sitter based extractors.

    Holds the node lookup helpers; subclasses decide which declarations
    they care about.
    """

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def walk_tree(self, node: Node, type_name: str) -> list[Node]:
        """
        Walk the tree and find all nodes of a specific type.

        Args:
            node: Starting node
            type_name: Node type to find

        Returns:
            List of matching nodes in document order
        """
        results = []

        def _walk(n: Node):
            if n.type == type_name:
                results.append(n)
            for child in n.children:
                _walk(child)

        _walk(node)
        return results
