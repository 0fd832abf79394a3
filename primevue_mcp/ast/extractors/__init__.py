"""
Syntax Tree Extractors

Each extractor walks a tree-sitter tree and returns structured metadata.
"""

from primevue_mcp.ast.extractors.base import SyntaxExtractor
from primevue_mcp.ast.extractors.typescript import DeclarationExtractor

__all__ = [
    "SyntaxExtractor",
    "DeclarationExtractor",
]
