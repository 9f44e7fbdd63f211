from sochat_mcp_server.neo4j.projection import (
    column,
    comment_projection,
    first_or_none,
    map_projection,
    post_projection,
    question_projection,
    user_projection,
)


def test_map_projection_adds_id_and_created():
    assert map_projection("n", ("a", "b")) == (
        "n {.a, .b, id: elementId(n), created: toString(n.created)}"
    )


def test_question_and_post_projections():
    assert question_projection() == (
        "question {.score, .title, .body, id: elementId(question), "
        "created: toString(question.created)}"
    )
    assert post_projection("p") == (
        "p {.score, .body, .postType, id: elementId(p), created: toString(p.created)}"
    )


def test_comment_projection_exposes_post_id():
    assert "postId: elementId(target)" in comment_projection("comment", "target")


def test_user_projection_renames_display_name():
    projection = user_projection()
    assert "name: user.displayName" in projection
    assert ".goldBadges" in projection


def test_column_skips_null_projections():
    rows = [{"post": {"id": "a"}}, {"post": None}, {"post": {"id": "b"}}]
    assert column(rows, "post") == [{"id": "a"}, {"id": "b"}]


def test_first_or_none():
    assert first_or_none([], "post") is None
    assert first_or_none([{"post": None}], "post") is None
    assert first_or_none([{"post": {"id": "a"}}], "post") == {"id": "a"}
