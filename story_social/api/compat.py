# story_social/api/compat.py
"""
Adapter for the older loose parameter naming.

Earlier clients (and documents written by them) use snake_case or shortened
keys. Everything is mapped onto the canonical camelCase keys here, before
schema validation, so the services only ever see one naming.
"""

from typing import Any, Dict, Mapping

from flask import Request

LEGACY_ALIASES = {
    'story_id': 'storyId',
    'comment_id': 'commentId',
    'comment_text': 'commentText',
    'text': 'commentText',
    'posted_by': 'postedBy',
    'author': 'postedBy',
    'posted_date': 'postedDate',
    'created_at': 'postedDate',
    'liked_by': 'likedBy',
    'user_id': 'userId',
    'user_has_liked': 'userHasLiked',
    'liked': 'userHasLiked',
    'reaction_name': 'reaction',
}

def normalize_params(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Returns a copy of `data` with legacy keys renamed.
    When both spellings are present the canonical key wins.
    """
    if not isinstance(data, Mapping):
        return data

    normalized = dict(data)
    for legacy, canonical in LEGACY_ALIASES.items():
        if legacy not in normalized:
            continue
        value = normalized.pop(legacy)
        normalized.setdefault(canonical, value)

    # Old clients sent the author as a bare user id.
    posted_by = normalized.get('postedBy')
    if isinstance(posted_by, str):
        normalized['postedBy'] = {'id': posted_by}
    elif isinstance(posted_by, Mapping) and 'id' not in posted_by and 'user_id' in posted_by:
        posted_by = dict(posted_by)
        posted_by['id'] = posted_by.pop('user_id')
        normalized['postedBy'] = posted_by
    return normalized

def collect_params(request: Request) -> Dict[str, Any]:
    """Query string and JSON body merged into one parameter dict; body values win."""
    params: Dict[str, Any] = request.args.to_dict()
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    return params
