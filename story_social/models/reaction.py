# story_social/models/reaction.py
from dataclasses import dataclass, field
from typing import List

@dataclass
class ReactionBucket:
    """A named reaction and the users who picked it."""
    name: str
    users: List[str] = field(default_factory=list)

@dataclass
class StoryReactions:
    """
    One entry of the shared reactions document.
    A user id appears in at most one bucket of a story.
    """
    story_id: str
    reactions: List[ReactionBucket] = field(default_factory=list)
