"""Shared MCP server and Neo4j wiring for the graph tools.

The server entrypoint must import and use this module so that there is
exactly one FastMCP server, one Neo4j client and one tool registry per
process.
"""

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .config import Config
from .neo4j import CommentDB, Neo4jClient, PostDB, UserDB
from .prompts import GOAL_DESCRIPTION, SYSTEM_PROMPT
from .tools import GraphTools

config = Config()

# Single shared MCP server instance
mcp = FastMCP(
    "sochat-mcp-server",
    instructions=SYSTEM_PROMPT,
    host=config.mcp_host,
    streamable_http_path="/",
    port=config.mcp_port,
)

# Shared Neo4j wiring for all tools
neo4j_client = Neo4jClient(config=config)
postdb = PostDB(neo4j_client)
commentdb = CommentDB(neo4j_client)
userdb = UserDB(neo4j_client)
graph_tools = GraphTools(postdb, commentdb, userdb)
registry = graph_tools.registry()

# All graph tools are read-only and safe to repeat
for spec in registry:
    mcp.add_tool(
        spec.func,
        name=spec.name,
        description=spec.description,
        annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True),
    )


@mcp.prompt(name="answer_from_graph", description=GOAL_DESCRIPTION)
def answer_from_graph(question: str) -> str:
    """System prompt followed by the user's question."""
    return f"{SYSTEM_PROMPT}\nQuestion: {question}"


__all__ = ["mcp", "config", "neo4j_client", "postdb", "commentdb", "userdb", "graph_tools", "registry"]
