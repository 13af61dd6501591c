# story_social/api/reactions/services.py

import logging
from typing import List, Optional, Tuple

from marshmallow import ValidationError

from story_social.engines import reaction_registry
from story_social.models.reaction import StoryReactions
from story_social.api.reactions.schemas import StoryReactionsSchema
from story_social.services.storage_service import StorageService, DocumentStoreError, load_json_document

class ReactionService:
    """
    Reads and updates the shared reactions document.
    All stories live in one document, so every update rewrites it whole.
    """
    def __init__(self, storage_service: StorageService, document_key: str = 'reactions/reactions.json'):
        self.storage = storage_service
        self.document_key = document_key
        self.document_schema = StoryReactionsSchema(many=True)

    def _load_stories(self) -> Optional[List[StoryReactions]]:
        """Parsed document, or None when it does not exist yet."""
        if not self.storage.exists(self.document_key):
            return None
        raw = self.storage.read(self.document_key)
        if raw is None:
            return None
        if not raw.strip():
            return []
        data = load_json_document(raw, self.document_key)
        if not isinstance(data, list):
            raise DocumentStoreError(f"Reactions document is not a list: {self.document_key}")
        try:
            return self.document_schema.load(data)
        except ValidationError as e:
            raise DocumentStoreError(f"Reactions document failed validation: {e.messages}") from e

    def get_reaction(self, story_id: str, user_id: str, log=logging) -> Tuple[Optional[str], bool]:
        """
        The user's reaction on a story.
        Returns (reaction name or None, whether the reactions document exists).
        """
        stories = self._load_stories()
        if stories is None:
            log.info("Reactions document does not exist yet")
            return None, False
        return reaction_registry.query_reaction(stories, story_id, user_id), True

    def set_reaction(self, story_id: str, user_id: str, reaction: str, log=logging) -> bool:
        """
        Sets or replaces the user's reaction on a story.
        Returns True when the reactions document was created by this call.
        """
        stories = self._load_stories()
        created = stories is None
        stories = reaction_registry.set_reaction(stories or [], story_id, user_id, reaction)
        self.storage.write_json(self.document_key, self.document_schema.dump(stories))
        log.info(f"Reaction '{reaction}' set for user {user_id} on story {story_id}")
        return created
