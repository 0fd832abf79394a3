"""
Tree-sitter Parser Wrapper

Parses TypeScript declaration files (.d.ts) into syntax trees.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from primevue_mcp.configs import get_logger

logger = get_logger("ast.parser")


# Supported grammars and their tree-sitter language getters
LANGUAGE_MODULES = {
    "typescript": tree_sitter_typescript.language_typescript,
}

# File extension to grammar mapping (.d.ts resolves through ".ts")
EXTENSION_TO_LANGUAGE = {
    ".ts": "typescript",
    ".mts": "typescript",
}


@dataclass
class ParsedSource:
    """A syntax tree together with the bytes it was parsed from."""

    tree: Tree
    source: bytes
    path: Optional[str] = None

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        """Source text covered by a node."""
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


class ASTParser:
    """
    Tree-sitter based TypeScript parser.

    Lazily initializes one parser per grammar on first use.
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}

    def _get_parser(self, lang_name: str) -> Optional[Parser]:
        """Get or create Parser for a grammar."""
        if lang_name in self._parsers:
            return self._parsers[lang_name]

        language_fn = LANGUAGE_MODULES.get(lang_name)
        if language_fn is None:
            logger.warning(f"Unsupported language: {lang_name}")
            return None

        parser = Parser(Language(language_fn()))
        self._parsers[lang_name] = parser
        return parser

    def detect_language(self, file_path: str) -> Optional[str]:
        """Detect grammar from file extension."""
        return EXTENSION_TO_LANGUAGE.get(Path(file_path).suffix.lower())

    def parse(self, source: str, language: str = "typescript") -> Optional[ParsedSource]:
        """
        Parse source code into a syntax tree.

        Tree-sitter is error tolerant: syntax errors yield ERROR nodes,
        not a failure.

        Returns:
            ParsedSource or None if the grammar is unavailable or parsing failed
        """
        parser = self._get_parser(language)
        if parser is None:
            return None

        data = source.encode("utf-8")
        try:
            tree = parser.parse(data)
        except (ValueError, RuntimeError) as e:
            logger.error(f"Failed to parse {language} code: {e}")
            return None
        return ParsedSource(tree=tree, source=data)

    def parse_file(self, file_path: str | Path) -> Optional[ParsedSource]:
        """
        Parse a file into a syntax tree.

        Returns:
            ParsedSource or None if unreadable or unsupported
        """
        language = self.detect_language(str(file_path))
        if language is None:
            return None

        try:
            content = Path(file_path).read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.error(f"Failed to read file {file_path}: {e}")
            return None

        parsed = self.parse(content, language)
        if parsed is not None:
            parsed.path = str(file_path)
        return parsed


# Global parser instance (lazy singleton)
_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Get the global ASTParser instance."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
