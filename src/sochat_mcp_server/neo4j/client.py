"""Neo4j connection, session management and read transactions."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from neo4j import READ_ACCESS, Driver, GraphDatabase, ManagedTransaction, Session

from ..config import Config

logger = logging.getLogger(__name__)


def _collect(tx: ManagedTransaction, cypher: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Run one statement and materialize its rows before the transaction ends."""
    result = tx.run(cypher, params)
    return result.data()


class Neo4jClient:
    """Neo4j database client with connection pooling."""

    def __init__(self, config: Optional[Config] = None) -> None:
        """Initialize Neo4j client with configuration."""
        self.config = config or Config()
        self._driver: Optional[Driver] = None

    def connect(self) -> None:
        """Establish connection to Neo4j database."""
        if self._driver is None:
            if not self.config.neo4j_password:
                logger.error(
                    "NEO4J_PASSWORD not set in environment variables or .env file"
                )
                raise ValueError(
                    "NEO4J_PASSWORD must be set in environment variables or .env file"
                )

            self._driver = GraphDatabase.driver(
                str(self.config.neo4j_uri),
                auth=(self.config.neo4j_username, self.config.neo4j_password),
                max_connection_lifetime=self.config.neo4j_max_connection_lifetime,
                max_connection_pool_size=self.config.neo4j_max_connection_pool_size,
            )

            # Driver creation is lazy, so check the server is reachable now.
            try:
                self._driver.verify_connectivity()
            except Exception as e:
                logger.error(f"Failed to connect to Neo4j: {e}")
                self._driver.close()
                self._driver = None
                raise ConnectionError(
                    f"Cannot connect to Neo4j database at {self.config.neo4j_uri}. "
                    "Please ensure Neo4j is running and accessible."
                ) from e

    def close(self) -> None:
        """Close the Neo4j driver connection."""
        if self._driver is not None:
            self._driver.close()
            self._driver = None

    @contextmanager
    def session(self, **kwargs) -> Iterator[Session]:
        """Context manager for a session on the configured database."""
        if self._driver is None:
            self.connect()

        assert self._driver is not None  # for type checkers
        session = self._driver.session(database=self.config.neo4j_database, **kwargs)
        try:
            yield session
        finally:
            session.close()

    def read(self, cypher: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Execute a single read-only statement and return its rows as dicts.

        The statement runs inside a managed read transaction on a fresh
        session; both are closed before returning, whether the query
        succeeded or raised.
        """
        logger.debug("Running read query with params %s", params)
        with self.session(default_access_mode=READ_ACCESS) as session:
            return session.execute_read(_collect, cypher, params or {})

    def verify_connectivity(self) -> bool:
        """Verify connection to Neo4j database."""
        try:
            if self._driver is None:
                self.connect()
            assert self._driver is not None
            self._driver.verify_connectivity()
            return True
        except Exception as e:
            logger.error("Neo4j connectivity check failed: %s", e, exc_info=True)
            return False

    def __enter__(self) -> "Neo4jClient":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
