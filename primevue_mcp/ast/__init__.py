"""
Syntax Tree Analysis

Tree-sitter based extraction of component signatures from TypeScript
declaration files.
"""

from primevue_mcp.ast.models import ComponentSignature, MemberSignature, members_to_map
from primevue_mcp.ast.parser import ASTParser, ParsedSource, get_parser

__all__ = [
    # Models
    "ComponentSignature",
    "MemberSignature",
    "members_to_map",
    # Parser
    "ASTParser",
    "ParsedSource",
    "get_parser",
]
