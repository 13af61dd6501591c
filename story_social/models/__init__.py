# story_social/models/__init__.py
from .comment import Comment
from .reaction import ReactionBucket, StoryReactions

__all__ = ['Comment', 'ReactionBucket', 'StoryReactions']
