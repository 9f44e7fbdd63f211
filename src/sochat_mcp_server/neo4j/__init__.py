"""
Neo4j database client, connection management, and low-level queries.

This package should contain ONLY Neo4j-specific logic:
- Connection/client setup
- Raw Cypher query functions and their projections

Publishing these queries to an LLM belongs in the `tools` package.
"""

from .client import Neo4jClient
from .comment import CommentDB
from .post import PostDB
from .user import UserDB

__all__ = [
    "Neo4jClient",
    "PostDB",
    "CommentDB",
    "UserDB",
]
