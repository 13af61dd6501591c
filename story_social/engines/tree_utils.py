# story_social/engines/tree_utils.py
"""
Comment forest traversal and dotted-path id helpers.

A comment id encodes its lineage: "3.1.2" is the second reply to the first
reply to comment "3". Traversal is depth-first pre-order: a node is visited
before its replies, and its replies before its next sibling.
"""

from typing import Callable, Iterator, List, Optional

from story_social.models.comment import Comment

PATH_SEPARATOR = '.'

def iter_comments(forest: List[Comment]) -> Iterator[Comment]:
    """Yields every comment of the forest in depth-first pre-order."""
    for comment in forest:
        yield comment
        if comment.replies:
            yield from iter_comments(comment.replies)

def find_first(forest: List[Comment], predicate: Callable[[Comment], bool]) -> Optional[Comment]:
    """Returns the first comment in DFS order matching `predicate`, or None."""
    return next((comment for comment in iter_comments(forest) if predicate(comment)), None)

def parent_path_id(comment_id: str) -> str:
    """
    Returns the part of `comment_id` before the last separator.
    An empty string means the comment belongs at the top level.

    >>> parent_path_id("3.1.2")
    '3.1'
    >>> parent_path_id("3")
    ''
    """
    head, sep, _ = comment_id.rpartition(PATH_SEPARATOR)
    return head if sep else ''

def count_comments(forest: List[Comment]) -> int:
    return sum(1 for _ in iter_comments(forest))
