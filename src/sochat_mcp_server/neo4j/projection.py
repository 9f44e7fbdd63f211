"""Cypher map projections for the Stack Overflow for Teams graph.

Every query in this package returns plain maps built by a Cypher map
projection rather than raw nodes, so results are JSON-serializable as
they come out of the driver:

- element ids are exposed as ``id`` via ``elementId(...)``
- temporal ``created`` values are rendered with ``toString(...)``
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

QUESTION_PROPERTIES = ("score", "title", "body")
POST_PROPERTIES = ("score", "body", "postType")
COMMENT_PROPERTIES = ("text",)
USER_PROPERTIES = ("reputation", "bronzeBadges", "silverBadges", "goldBadges")


def map_projection(
    var: str,
    properties: Sequence[str],
    extra: Optional[Mapping[str, str]] = None,
) -> str:
    """Build a map projection such as ``post {.score, id: elementId(post), ...}``.

    Args:
        var: Cypher variable being projected.
        properties: Node properties copied as-is (``.name`` selectors).
        extra: Additional ``key: expression`` entries, placed before the
            ``id`` and ``created`` entries shared by every record type.
    """
    entries = [f".{prop}" for prop in properties]
    for key, expression in (extra or {}).items():
        entries.append(f"{key}: {expression}")
    entries.append(f"id: elementId({var})")
    entries.append(f"created: toString({var}.created)")
    return f"{var} {{{', '.join(entries)}}}"


def question_projection(var: str = "question") -> str:
    return map_projection(var, QUESTION_PROPERTIES)


def post_projection(var: str = "post") -> str:
    return map_projection(var, POST_PROPERTIES)


def comment_projection(var: str = "comment", post_var: str = "target") -> str:
    return map_projection(
        var, COMMENT_PROPERTIES, extra={"postId": f"elementId({post_var})"}
    )


def user_projection(var: str = "user") -> str:
    return map_projection(var, USER_PROPERTIES, extra={"name": f"{var}.displayName"})


def column(rows: List[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    """Pull one projected column out of every row, skipping nulls."""
    return [row[key] for row in rows if row.get(key) is not None]


def first_or_none(rows: List[Dict[str, Any]], key: str) -> Optional[Dict[str, Any]]:
    """Return the projected value of the first row, or None when absent.

    OPTIONAL MATCH yields a single row with a null projection when the
    relation is missing; an unknown start node yields no rows at all.
    Both are treated as "no result".
    """
    if not rows:
        return None
    return rows[0].get(key)
