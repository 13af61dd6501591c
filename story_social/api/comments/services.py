# story_social/api/comments/services.py

import logging
from typing import Any, Dict, List, Optional, Tuple

from marshmallow import ValidationError

from story_social.engines import comment_tree
from story_social.engines.tree_utils import count_comments
from story_social.models.comment import Comment
from story_social.api.comments.schemas import CommentDocumentSchema
from story_social.services.storage_service import (
    StorageService, DocumentStoreError, DocumentNotFoundError, load_json_document
)

class CommentService:
    """
    Loads a story's comment document, runs one comment-tree operation on it
    and writes the whole document back.
    The document is written only after the operation succeeded, and only if it changed.
    """
    def __init__(self, storage_service: StorageService, prefix: str = 'comments'):
        self.storage = storage_service
        self.prefix = prefix.strip('/')
        self.document_schema = CommentDocumentSchema(many=True)

    def document_key(self, story_id: str) -> str:
        return f"{self.prefix}/{story_id}.json"

    def _read_document(self, key: str) -> Optional[bytes]:
        """Raw document bytes, or None when there is no document."""
        if not self.storage.exists(key):
            return None
        return self.storage.read(key)

    def _decode_forest(self, raw: bytes, key: str) -> List[Comment]:
        if not raw.strip():
            return []
        data = load_json_document(raw, key)
        if not isinstance(data, list):
            raise DocumentStoreError(f"Comment document is not a list: {key}")
        try:
            return self.document_schema.load(data)
        except ValidationError as e:
            raise DocumentStoreError(f"Comment document failed validation: {key} - {e.messages}") from e

    def _save_forest(self, key: str, forest: List[Comment]) -> List[Dict[str, Any]]:
        data = self.document_schema.dump(forest)
        self.storage.write_json(key, data)
        return data

    def get_comments(self, story_id: str, log=logging) -> List[Dict[str, Any]]:
        """All comments of a story. A story without a document has no comments."""
        key = self.document_key(story_id)
        raw = self._read_document(key)
        if raw is None:
            log.info(f"No comment document for story {story_id}")
            return []
        forest = self._decode_forest(raw, key)
        log.debug(f"Loaded {count_comments(forest)} comments for story {story_id}")
        return self.document_schema.dump(forest)

    def save_comment(self, story_id: str, comment: Comment, log=logging) -> Tuple[List[Dict[str, Any]], bool]:
        """
        Creates or edits a comment.
        Returns the full updated forest and whether the story document was newly created.
        """
        key = self.document_key(story_id)
        raw = self._read_document(key)
        created = raw is None
        forest = [] if created else self._decode_forest(raw, key)

        forest = comment_tree.upsert(forest, comment, log=log)
        data = self._save_forest(key, forest)
        log.info(f"Saved comment {comment.comment_id} for story {story_id}")
        return data, created

    def set_like(self, story_id: str, comment_id: str, user_id: str, liked: bool, log=logging) -> List[Dict[str, Any]]:
        """
        Likes or unlikes a comment.
        :raises DocumentNotFoundError: the story has no comment document, or it is empty.
        """
        key = self.document_key(story_id)
        raw = self._read_document(key)
        if raw is None:
            log.warning(f"File not found: {key}")
            raise DocumentNotFoundError("File not found.")
        if not raw.strip():
            log.warning(f"File is empty: {key}")
            raise DocumentNotFoundError("File is empty.")

        forest = self._decode_forest(raw, key)
        target = comment_tree.find_by_id(forest, comment_id)
        if target is None:
            log.warning(f"Comment {comment_id} not found in story {story_id}; nothing to update")
            return self.document_schema.dump(forest)
        if (user_id in (target.liked_by or [])) == liked:
            log.debug(f"Like state of comment {comment_id} for user {user_id} already {liked}")
            return self.document_schema.dump(forest)

        forest = comment_tree.set_like(forest, comment_id, user_id, liked)
        data = self._save_forest(key, forest)
        log.info(f"{'Liked' if liked else 'Unliked'} comment {comment_id} by user {user_id}")
        return data
