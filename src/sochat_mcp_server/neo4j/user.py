"""Neo4j helpers for user-level queries."""

from typing import Any, Dict, Optional

from .base import GraphDB
from .projection import first_or_none, user_projection


class UserDB(GraphDB):
    """Low-level Neo4j user query helpers backed by a Neo4jClient."""

    def get_user(self, entity_id: str) -> Optional[Dict[str, Any]]:
        """Get the user who wrote a post (question/answer) or a comment.

        Args:
            entity_id: Element id of a post or comment.

        Returns:
            The author record, or None when the id matches nothing or the
            entity has no author edge:
                {"id", "name", "reputation", "bronzeBadges",
                 "silverBadges", "goldBadges", "created"}
        """
        eid = self._require(entity_id, "entity_id")

        cypher = f"""
        MATCH (e) WHERE elementId(e) = $entity
        MATCH (e)-[:POSTED_BY|COMMENTED_BY]->(user:User)
        RETURN {user_projection('user')} AS user
        LIMIT 1
        """

        rows = self.client.read(cypher, {"entity": eid})
        return first_or_none(rows, "user")
