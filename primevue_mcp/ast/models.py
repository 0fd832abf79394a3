"""
Data Models for Signature Extraction

Structured representations of the public API declared by a component.
"""

from dataclasses import dataclass, field


@dataclass
class MemberSignature:
    """One member of an interface or object type literal."""

    name: str
    type_text: str  # Source-level type, "any" when unannotated
    kind: str = "property"  # property, method
    optional: bool = False


@dataclass
class ComponentSignature:
    """Props, emits and slots declared for one component."""

    props: dict[str, str] = field(default_factory=dict)
    emits: dict[str, str] = field(default_factory=dict)
    slots: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            "props": dict(self.props),
            "emits": dict(self.emits),
            "slots": dict(self.slots),
        }


def members_to_map(members: list[MemberSignature]) -> dict[str, str]:
    """Collapse members into name -> type text (later duplicates win)."""
    return {m.name: m.type_text for m in members}
