"""Tool contract published to LLM tool-calling loops and MCP clients."""

from .graph_tools import GraphTools
from .registry import ToolRegistry, ToolSpec

__all__ = [
    "GraphTools",
    "ToolRegistry",
    "ToolSpec",
]
