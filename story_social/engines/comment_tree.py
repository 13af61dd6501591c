# story_social/engines/comment_tree.py
"""
Comment Tree Engine.

Pure, synchronous transforms over a story's comment forest. Every function
mutates the forest it receives and returns it; nothing is kept between calls
and nothing touches storage.
"""

import logging
from typing import List, Optional

from story_social.models.comment import Comment
from story_social.engines.tree_utils import find_first, parent_path_id

logger = logging.getLogger(__name__)

def find_by_id(forest: List[Comment], comment_id: str) -> Optional[Comment]:
    """
    Finds a comment anywhere in the forest.
    If an id occurs more than once, the first one in DFS order wins.
    """
    return find_first(forest, lambda comment: comment.comment_id == comment_id)

def find_parent_by_path_id(forest: List[Comment], parent_id: str) -> Optional[Comment]:
    """Locates the insertion point for a reply whose id is prefixed with `parent_id`."""
    if not parent_id:
        return None
    return find_first(forest, lambda comment: comment.comment_id == parent_id)

def upsert(forest: List[Comment], incoming: Comment, log: Optional[logging.Logger] = None) -> List[Comment]:
    """
    Merges one comment into the forest.

    - Existing id: text, author and date are overwritten in place.
      `replies` and `liked_by` of the stored node are kept.
    - New id: appended under the parent named by its dotted path, or at the
      top level when it has no parent segment or the parent does not exist.
    Existing nodes are never relocated.
    """
    log = log or logger

    existing = find_by_id(forest, incoming.comment_id)
    if existing is not None:
        existing.comment_text = incoming.comment_text
        existing.posted_by = incoming.posted_by
        existing.posted_date = incoming.posted_date
        return forest

    parent_id = parent_path_id(incoming.comment_id)
    if not parent_id:
        forest.append(incoming)
        return forest

    parent = find_parent_by_path_id(forest, parent_id)
    if parent is None:
        log.warning(f"Parent comment '{parent_id}' not found for '{incoming.comment_id}'; storing it at top level.")
        forest.append(incoming)
        return forest

    if parent.replies is None:
        parent.replies = []
    parent.replies.append(incoming)
    return forest

def set_like(forest: List[Comment], comment_id: str, user_id: str, liked: bool) -> List[Comment]:
    """Adds or removes `user_id` from a comment's likes. Idempotent; unknown ids are a no-op."""
    comment = find_by_id(forest, comment_id)
    if comment is None:
        return forest

    if comment.liked_by is None:
        comment.liked_by = []

    if liked:
        if user_id not in comment.liked_by:
            comment.liked_by.append(user_id)
    elif user_id in comment.liked_by:
        # Drops every copy, so documents holding duplicates end up clean.
        comment.liked_by = [u for u in comment.liked_by if u != user_id]
    return forest
