"""
MCP Server implementation for the Stack Overflow for Teams graph.

This module is the entrypoint used when running the MCP server process.
It imports the shared `mcp` instance, which registers every graph tool
on the same FastMCP server.
"""

from __future__ import annotations

import logging

from .config import Config

# Configure logging before FastMCP is created; it installs its own root
# handler otherwise and basicConfig becomes a no-op.
_log_config = Config()
logging.basicConfig(
    level=_log_config.log_level.upper(),
    handlers=[logging.FileHandler(_log_config.log_file)]
)

from .mcp_instance import mcp, neo4j_client  # noqa: E402  shared FastMCP instance

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the MCP server."""
    logger.info("Starting MCP server 'sochat-mcp-server'...")
    if not neo4j_client.verify_connectivity():
        logger.warning("Neo4j is not reachable yet; tool calls will fail until it is")
    try:
        # Run the shared FastMCP instance; this will block the current process.
        mcp.run(transport="streamable-http")
    finally:
        neo4j_client.close()


if __name__ == "__main__":
    main()
