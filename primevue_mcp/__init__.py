"""
PrimeVue MCP - component metadata for AI agents.

Extracts props, emits, slots, documentation, logic signals and design tokens
from the PrimeVue component library and serves them over HTTP and MCP.
"""

__version__ = "1.0.0"
