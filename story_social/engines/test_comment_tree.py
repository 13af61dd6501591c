# story_social/engines/test_comment_tree.py
"""
Comment tree engine tests

Usage: python -m pytest story_social/engines/test_comment_tree.py -v
"""

import logging

from story_social.engines import comment_tree
from story_social.engines.tree_utils import iter_comments
from story_social.models.comment import Comment

def make_comment(comment_id, text="hello", user="u1", **kwargs):
    return Comment(
        comment_id=comment_id,
        comment_text=text,
        posted_by={'id': user},
        posted_date="2024-01-15T10:30:00Z",
        **kwargs
    )

def build_forest():
    """
    1
    ├── 1.1
    │   └── 1.1.1
    └── 1.2
    2
    """
    return [
        make_comment("1", replies=[
            make_comment("1.1", replies=[make_comment("1.1.1")]),
            make_comment("1.2"),
        ]),
        make_comment("2"),
    ]

def test_find_by_id_searches_all_levels():
    forest = build_forest()
    assert comment_tree.find_by_id(forest, "2").comment_id == "2"
    assert comment_tree.find_by_id(forest, "1.1.1").comment_id == "1.1.1"
    assert comment_tree.find_by_id(forest, "9") is None
    assert comment_tree.find_by_id([], "1") is None

def test_find_by_id_first_match_in_dfs_order_wins():
    # Broken document: "x" appears twice. The nested one comes first in DFS order.
    nested = make_comment("x", text="nested")
    forest = [make_comment("1", replies=[nested]), make_comment("x", text="top")]
    assert comment_tree.find_by_id(forest, "x") is nested

def test_find_parent_by_path_id():
    forest = build_forest()
    assert comment_tree.find_parent_by_path_id(forest, "1.1").comment_id == "1.1"
    assert comment_tree.find_parent_by_path_id(forest, "") is None
    assert comment_tree.find_parent_by_path_id(forest, "7") is None

def test_upsert_into_empty_forest_then_reply():
    forest = comment_tree.upsert([], make_comment("1"))
    forest = comment_tree.upsert(forest, make_comment("1.1"))

    assert len(forest) == 1
    assert forest[0].replies[0].comment_id == "1.1"

def test_upsert_appends_reply_in_arrival_order():
    forest = build_forest()
    comment_tree.upsert(forest, make_comment("1.3"))
    comment_tree.upsert(forest, make_comment("1.1.2"))

    assert [c.comment_id for c in forest[0].replies] == ["1.1", "1.2", "1.3"]
    assert [c.comment_id for c in forest[0].replies[0].replies] == ["1.1.1", "1.1.2"]

def test_upsert_creates_missing_replies_list():
    parent = make_comment("5")
    parent.replies = None
    forest = comment_tree.upsert([parent], make_comment("5.1"))
    assert [c.comment_id for c in forest[0].replies] == ["5.1"]

def test_upsert_edit_keeps_replies_and_likes():
    r1, r2 = make_comment("1.1"), make_comment("1.2")
    original = make_comment("1", text="old", replies=[r1, r2], liked_by=["u1"])
    forest = [original]

    edit = make_comment("1", text="new", user="u9")
    edit.posted_date = "2024-02-01T00:00:00Z"
    forest = comment_tree.upsert(forest, edit)

    node = forest[0]
    assert node is original
    assert node.comment_text == "new"
    assert node.posted_by == {'id': "u9"}
    assert node.posted_date == "2024-02-01T00:00:00Z"
    assert node.replies == [r1, r2]
    assert node.liked_by == ["u1"]

def test_upsert_edit_of_nested_comment_does_not_move_it():
    forest = build_forest()
    comment_tree.upsert(forest, make_comment("1.1.1", text="edited"))

    assert len(forest) == 2
    assert forest[0].replies[0].replies[0].comment_text == "edited"
    assert sum(1 for c in iter_comments(forest) if c.comment_id == "1.1.1") == 1

def test_upsert_dangling_parent_falls_back_to_top_level(caplog):
    with caplog.at_level(logging.WARNING):
        forest = comment_tree.upsert([], make_comment("9.9"))

    assert [c.comment_id for c in forest] == ["9.9"]
    assert "9.9" in caplog.text

def test_set_like_is_idempotent():
    forest = build_forest()
    comment_tree.set_like(forest, "1.2", "u2", True)
    comment_tree.set_like(forest, "1.2", "u2", True)
    assert comment_tree.find_by_id(forest, "1.2").liked_by == ["u2"]

    comment_tree.set_like(forest, "1.2", "u2", False)
    comment_tree.set_like(forest, "1.2", "u2", False)
    assert comment_tree.find_by_id(forest, "1.2").liked_by == []

def test_set_like_keeps_other_users():
    forest = [make_comment("1", liked_by=["a", "b"])]
    comment_tree.set_like(forest, "1", "c", True)
    comment_tree.set_like(forest, "1", "a", False)
    assert forest[0].liked_by == ["b", "c"]

def test_set_like_unknown_comment_is_noop():
    forest = build_forest()
    before = [(c.comment_id, list(c.liked_by)) for c in iter_comments(forest)]
    result = comment_tree.set_like(forest, "404", "u1", True)
    assert result is forest
    assert [(c.comment_id, list(c.liked_by)) for c in iter_comments(forest)] == before

def test_set_like_handles_missing_liked_by():
    comment = make_comment("1")
    comment.liked_by = None
    comment_tree.set_like([comment], "1", "u1", False)
    assert comment.liked_by == []
    comment_tree.set_like([comment], "1", "u1", True)
    assert comment.liked_by == ["u1"]

def test_unlike_clears_duplicate_entries():
    forest = [make_comment("1", liked_by=["u1", "u2", "u1"])]
    comment_tree.set_like(forest, "1", "u1", False)
    assert forest[0].liked_by == ["u2"]
    comment_tree.set_like(forest, "1", "u1", False)
    assert forest[0].liked_by == ["u2"]
