"""Plain registry of tools an LLM tool-calling loop may invoke.

A tool is a named, described, side-effect free callable taking exactly
one string argument and returning a JSON-serializable value. The
registry is the single source the orchestrator and the MCP server read
tool definitions from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List


@dataclass(frozen=True)
class ToolSpec:
    """Definition of one published tool."""

    name: str
    description: str
    func: Callable[[str], Any]
    parameter: str
    parameter_description: str = ""

    def schema(self) -> Dict[str, Any]:
        """JSON-schema style description of the tool and its parameter."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {
                "type": "object",
                "properties": {
                    self.parameter: {
                        "type": "string",
                        "description": self.parameter_description,
                    }
                },
                "required": [self.parameter],
            },
        }

    def __call__(self, argument: str) -> Any:
        return self.func(argument)


class ToolRegistry:
    """Ordered mapping from tool name to ToolSpec."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> ToolSpec:
        if spec.name in self._tools:
            raise ValueError(f"Tool {spec.name!r} is already registered")
        self._tools[spec.name] = spec
        return spec

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"Unknown tool {name!r}") from None

    def call(self, name: str, argument: str) -> Any:
        """Invoke a tool by name with its single string argument."""
        return self.get(name)(argument)

    def names(self) -> List[str]:
        return list(self._tools)

    def schemas(self) -> List[Dict[str, Any]]:
        return [spec.schema() for spec in self._tools.values()]

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
