# story_social/engines/reaction_registry.py
"""
Reaction Registry Engine.

Each story holds a list of named buckets; a user belongs to at most one
bucket per story. Choosing a new reaction moves the user out of the old one.
Emptied buckets are kept so bucket order stays stable.
"""

from typing import List, Optional

from story_social.models.reaction import ReactionBucket, StoryReactions

def find_story(stories: List[StoryReactions], story_id: str) -> Optional[StoryReactions]:
    return next((story for story in stories if story.story_id == story_id), None)

def _bucket_with_user(story: StoryReactions, user_id: str) -> Optional[ReactionBucket]:
    return next((bucket for bucket in story.reactions if user_id in bucket.users), None)

def _bucket_named(story: StoryReactions, name: str) -> Optional[ReactionBucket]:
    return next((bucket for bucket in story.reactions if bucket.name == name), None)

def set_reaction(stories: List[StoryReactions], story_id: str, user_id: str, reaction_name: str) -> List[StoryReactions]:
    """Sets or replaces the user's reaction on a story and returns the mutated list."""
    story = find_story(stories, story_id)
    if story is None:
        stories.append(StoryReactions(
            story_id=story_id,
            reactions=[ReactionBucket(name=reaction_name, users=[user_id])]
        ))
        return stories

    # Both lookups run before any change: they may return the same bucket.
    previous = _bucket_with_user(story, user_id)
    target = _bucket_named(story, reaction_name)

    while previous is not None:
        # Loops only for documents that already broke exclusivity.
        previous.users = [u for u in previous.users if u != user_id]
        previous = _bucket_with_user(story, user_id)

    if target is not None:
        if user_id not in target.users:
            target.users.append(user_id)
    else:
        story.reactions.append(ReactionBucket(name=reaction_name, users=[user_id]))
    return stories

def query_reaction(stories: List[StoryReactions], story_id: str, user_id: str) -> Optional[str]:
    """Returns the name of the user's reaction on a story, or None."""
    story = find_story(stories, story_id)
    if story is None:
        return None
    bucket = _bucket_with_user(story, user_id)
    return bucket.name if bucket else None
