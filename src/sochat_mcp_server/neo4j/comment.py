"""
Neo4j helpers for comment-level queries.

Comments hang off exactly one post through ``ON_POST`` and point at
their author through ``COMMENTED_BY``. Each comment record carries the
id of the post it belongs to as ``postId``.
"""

from typing import Any, Dict, List

from .base import GraphDB
from .projection import column, comment_projection


class CommentDB(GraphDB):
    """Low-level Neo4j comment query helpers backed by a Neo4jClient."""

    def get_comments(self, post_id: str) -> List[Dict[str, Any]]:
        """Fetch all comments on a post (question or answer).

        Args:
            post_id: Element id of the post.

        Returns:
            List of comment records, possibly empty:
                {"id", "text", "postId", "created"}
        """
        pid = self._require(post_id, "post_id")

        cypher = f"""
        MATCH (target:Post) WHERE elementId(target) = $post
        MATCH (target)<-[:ON_POST]-(comment:Comment)
        RETURN {comment_projection('comment', 'target')} AS comment
        """

        rows = self.client.read(cypher, {"post": pid})
        return column(rows, "comment")

    def get_user_comments(self, user_id: str) -> List[Dict[str, Any]]:
        """List all comments written by a user."""
        uid = self._require(user_id, "user_id")

        cypher = f"""
        MATCH (u:User) WHERE elementId(u) = $user
        MATCH (comment:Comment)-[:COMMENTED_BY]->(u)
        OPTIONAL MATCH (comment)-[:ON_POST]->(target:Post)
        RETURN {comment_projection('comment', 'target')} AS comment
        """

        rows = self.client.read(cypher, {"user": uid})
        return column(rows, "comment")
