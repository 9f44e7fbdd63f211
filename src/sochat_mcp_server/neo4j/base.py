"""Shared plumbing for the query helper classes."""

from typing import Optional

from .client import Neo4jClient


class GraphDB:
    """Base class for low-level query helpers backed by a Neo4jClient.

    The client is responsible for connection management; subclasses only
    build Cypher and run it through ``client.read``.
    """

    def __init__(self, client: Neo4jClient) -> None:
        self.client = client

    @staticmethod
    def _norm(value: Optional[str]) -> Optional[str]:
        """Normalize string inputs: strip whitespace, treat empty as None."""
        if value is None:
            return None
        v = value.strip()
        return v if v else None

    def _require(self, value: Optional[str], name: str) -> str:
        """Normalize a required identifier or text argument."""
        v = self._norm(value)
        if v is None:
            raise ValueError(f"{name} must be a non-empty string")
        return v
