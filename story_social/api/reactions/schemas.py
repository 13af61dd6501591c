# story_social/api/reactions/schemas.py
from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE

from story_social.api.comments.schemas import RequestSchema # legacy name mapping is shared with comments
from story_social.api.compat import normalize_params
from story_social.models.reaction import ReactionBucket, StoryReactions

class ReactionBucketSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True)
    users = fields.List(fields.Str(), load_default=list)

    @pre_load
    def drop_null_users(self, data, **kwargs):
        # Absent and null lists are the same thing in stored documents.
        if isinstance(data, dict) and 'users' in data and data['users'] is None:
            data = {k: v for k, v in data.items() if k != 'users'}
        return data

    @post_load
    def make_bucket(self, data, **kwargs):
        return ReactionBucket(**data)

class StoryReactionsSchema(Schema):
    """One story entry of the shared `reactions/reactions.json` document."""
    class Meta:
        unknown = EXCLUDE

    story_id = fields.Str(required=True, data_key='storyId')
    reactions = fields.List(fields.Nested(ReactionBucketSchema), load_default=list)

    @pre_load
    def map_legacy_names(self, data, **kwargs):
        data = normalize_params(data)
        if isinstance(data, dict) and 'reactions' in data and data['reactions'] is None:
            data.pop('reactions')
        return data

    @post_load
    def make_story(self, data, **kwargs):
        return StoryReactions(**data)

class ReactionQuerySchema(RequestSchema):
    """GET /api/reactions"""
    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))
    story_id = fields.Str(required=True, data_key='storyId', validate=validate.Length(min=1))

class ReactionSetSchema(RequestSchema):
    """POST /api/reactions"""
    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))
    story_id = fields.Str(required=True, data_key='storyId', validate=validate.Length(min=1))
    reaction = fields.Str(required=True, validate=validate.Length(min=1))

class ReactionResponseSchema(Schema):
    reaction_name = fields.Str(required=True)
