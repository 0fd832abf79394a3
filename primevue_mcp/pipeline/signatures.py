"""
Signature Extractor

Builds api.json: props, emits and slots for every component that ships a
TypeScript declaration file.
"""

from pathlib import Path
from typing import Optional

from primevue_mcp.ast.extractors import DeclarationExtractor
from primevue_mcp.ast.models import ComponentSignature
from primevue_mcp.ast.parser import ASTParser, get_parser
from primevue_mcp.configs import get_logger
from primevue_mcp.configs.constants import COMPONENT_NAME_MAP
from primevue_mcp.pipeline.io import write_json
from primevue_mcp.pipeline.walker import first_existing, iter_component_dirs

logger = get_logger("pipeline.signatures")


def get_pascal_case_name(dir_name: str) -> str:
    """
    Convert a component directory name to its PascalCase type prefix.

    Multi-word names come from COMPONENT_NAME_MAP; anything else just
    gets its first letter capitalized.
    """
    mapped = COMPONENT_NAME_MAP.get(dir_name)
    if mapped:
        return mapped
    return dir_name[:1].upper() + dir_name[1:]


def find_definition_file(component_dir: Path) -> Optional[Path]:
    """Locate index.d.ts or <dir>.d.ts inside a component directory."""
    return first_existing([
        component_dir / "index.d.ts",
        component_dir / f"{component_dir.name}.d.ts",
    ])


class SignatureExtractor:
    """Extracts component signatures from a library checkout."""

    def __init__(
        self,
        parser: Optional[ASTParser] = None,
        extractor: Optional[DeclarationExtractor] = None,
    ):
        self.parser = parser or get_parser()
        self.extractor = extractor or DeclarationExtractor()

    def extract_file(self, definition_file: Path, pascal_name: str) -> ComponentSignature:
        """Extract one declaration file; unparseable files yield empty maps."""
        parsed = self.parser.parse_file(definition_file)
        if parsed is None:
            logger.warning(f"Could not parse {definition_file}")
            return ComponentSignature()
        return self.extractor.extract_component(parsed, pascal_name)

    def extract_all(self, library_dir: str | Path) -> dict[str, dict]:
        """
        Extract every component under the library root.

        Components without a declaration file are skipped silently.

        Returns:
            Mapping of directory name -> {props, emits, slots}
        """
        components: dict[str, dict] = {}

        for component_dir in iter_component_dirs(library_dir):
            definition_file = find_definition_file(component_dir)
            if definition_file is None:
                continue

            pascal_name = get_pascal_case_name(component_dir.name)
            signature = self.extract_file(definition_file, pascal_name)
            components[component_dir.name] = signature.to_dict()
            logger.debug(
                f"{component_dir.name}: {len(signature.props)} props, "
                f"{len(signature.emits)} emits, {len(signature.slots)} slots"
            )

        return components


def run_signature_extraction(library_dir: str | Path, output_path: str | Path) -> dict[str, dict]:
    """Extract all component signatures and write them to output_path."""
    logger.info(f"Extracting component APIs from {library_dir}")
    components = SignatureExtractor().extract_all(library_dir)
    write_json(output_path, components)
    logger.info(f"Extracted {len(components)} components -> {output_path}")
    return components
