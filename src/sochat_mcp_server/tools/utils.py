"""Utility functions for published tools."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

tools_logger = logging.getLogger('sochat.mcp.tools')


def log_tool_call(function_name: str, phase: str, extra: Dict[str, Any], duration: Optional[float] = None) -> None:
    """Helper function to log tool calls and completions.

    Args:
        function_name: Name of the tool.
        phase: Either "called" or "completed".
        extra: Dictionary of additional data to log.
        duration: Optional duration in seconds (for "completed" phase).
    """
    if duration is not None:
        extra["duration_seconds"] = duration
    tools_logger.info(
        f"{function_name} {phase}",
        extra=extra
    )


def result_count(result: Any) -> int:
    """Number of records in a tool result (a list, a record or a sentinel)."""
    if isinstance(result, list):
        return len(result)
    if isinstance(result, dict):
        return 1
    return 0
