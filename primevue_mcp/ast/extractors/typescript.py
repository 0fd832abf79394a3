"""
TypeScript Declaration Extractor

Pulls the public component API out of PrimeVue .d.ts files:

- ``<Pascal>Props`` interface -> props
- ``<Pascal>Slots`` interface -> slots
- ``<Pascal>EmitsOptions`` interface and ``<Pascal>Emits = EmitFn<{...}>``
  alias -> emits (alias entries override interface entries)

Member normalization:

- string-literal names are unquoted (``'update:modelValue'`` -> ``update:modelValue``)
- method signatures render as ``(<params>) => <return>``, with ``any``
  for a missing return annotation
- props and slots accept method signatures as well as property
  signatures, since slots are usually declared as methods
"""

from typing import Optional

from tree_sitter import Node

from primevue_mcp.ast.extractors.base import SyntaxExtractor
from primevue_mcp.ast.models import ComponentSignature, MemberSignature, members_to_map
from primevue_mcp.ast.parser import ParsedSource

MEMBER_TYPES = ("property_signature", "method_signature")

EMIT_FN = "EmitFn"


class DeclarationExtractor(SyntaxExtractor):
    """Extracts props/emits/slots signatures from TypeScript declarations."""

    def extract_component(self, parsed: ParsedSource, pascal_name: str) -> ComponentSignature:
        """
        Extract the full signature of one component.

        Args:
            parsed: Parsed declaration file
            pascal_name: PascalCase component name (e.g. "InputText")

        Returns:
            ComponentSignature (maps are empty when nothing is declared)
        """
        return ComponentSignature(
            props=members_to_map(self.interface_members(parsed, f"{pascal_name}Props")),
            emits=self.extract_emits(parsed, pascal_name),
            slots=members_to_map(self.interface_members(parsed, f"{pascal_name}Slots")),
        )

    def extract_emits(self, parsed: ParsedSource, pascal_name: str) -> dict[str, str]:
        """Merge interface-declared emits with EmitFn<{...}> alias emits."""
        emits = members_to_map(self.interface_members(parsed, f"{pascal_name}EmitsOptions"))
        emits.update(members_to_map(self.emit_fn_members(parsed, f"{pascal_name}Emits")))
        return emits

    def interface_members(self, parsed: ParsedSource, interface_name: str) -> list[MemberSignature]:
        """Members of every interface declaration named ``interface_name``."""
        members = []
        for node in self.walk_tree(parsed.root, "interface_declaration"):
            if self._declared_name(node, parsed) != interface_name:
                continue
            body = node.child_by_field_name("body")
            if body is not None:
                members.extend(self._extract_members(body, parsed))
        return members

    def emit_fn_members(self, parsed: ParsedSource, alias_name: str) -> list[MemberSignature]:
        """Members of the inline object literal in ``type X = EmitFn<{...}>``."""
        members = []
        for node in self.walk_tree(parsed.root, "type_alias_declaration"):
            if self._declared_name(node, parsed) != alias_name:
                continue
            literal = self._emit_fn_literal(node, parsed)
            if literal is not None:
                members.extend(self._extract_members(literal, parsed))
        return members

    def _emit_fn_literal(self, alias: Node, parsed: ParsedSource) -> Optional[Node]:
        value = alias.child_by_field_name("value")
        if value is None or value.type != "generic_type":
            return None

        name_node = value.child_by_field_name("name")
        if name_node is None or parsed.text(name_node) != EMIT_FN:
            return None

        type_args = value.child_by_field_name("type_arguments") or self.find_child(value, "type_arguments")
        if type_args is None or not type_args.named_children:
            return None

        first = type_args.named_children[0]
        return first if first.type == "object_type" else None

    def _declared_name(self, node: Node, parsed: ParsedSource) -> Optional[str]:
        name_node = node.child_by_field_name("name")
        return parsed.text(name_node) if name_node is not None else None

    def _extract_members(self, body: Node, parsed: ParsedSource) -> list[MemberSignature]:
        members = []
        for child in body.named_children:
            if child.type not in MEMBER_TYPES:
                continue
            member = self._extract_member(child, parsed)
            if member:
                members.append(member)
        return members

    def _extract_member(self, node: Node, parsed: ParsedSource) -> Optional[MemberSignature]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        name = self._member_name(name_node, parsed)
        optional = any(child.type == "?" for child in node.children)

        if node.type == "method_signature":
            params = node.child_by_field_name("parameters")
            params_text = parsed.text(params) if params is not None else "()"
            return_type = self._annotation_text(node.child_by_field_name("return_type"), parsed)
            return MemberSignature(
                name=name,
                type_text=f"{params_text} => {return_type}",
                kind="method",
                optional=optional,
            )

        return MemberSignature(
            name=name,
            type_text=self._annotation_text(node.child_by_field_name("type"), parsed),
            optional=optional,
        )

    def _member_name(self, node: Node, parsed: ParsedSource) -> str:
        """Member name with quotes removed from string-literal names."""
        if node.type == "string":
            fragment = self.find_child(node, "string_fragment")
            if fragment is not None:
                return parsed.text(fragment)
            return parsed.text(node).strip("'\"")
        return parsed.text(node)

    def _annotation_text(self, annotation: Optional[Node], parsed: ParsedSource) -> str:
        """Type text of a type_annotation node, skipping the colon."""
        if annotation is None:
            return "any"
        for child in annotation.named_children:
            return parsed.text(child)
        return "any"
