# story_social/api/comments/schemas.py
from marshmallow import Schema, fields, validate, pre_load, post_load, ValidationError, EXCLUDE, INCLUDE

from story_social.api.compat import normalize_params
from story_social.models.comment import Comment
from story_social.utils.datetime_utils import is_timestamp, now_iso

# Story ids become part of a document key, so no path separators or '..'.
validate_story_id = validate.Regexp(
    r'^(?!.*\.\.)[A-Za-z0-9_\-:.]+$',
    error="storyId may only contain letters, digits, '_', '-', ':' and '.'."
)

# Dot-separated, non-empty segments: "3", "3.1", "3.1.2".
validate_comment_id = validate.Regexp(
    r'^[^.\s]+(\.[^.\s]+)*$',
    error="commentId must be dot-separated non-empty segments, e.g. '3.1'."
)

def validate_posted_date(value: str):
    if not is_timestamp(value):
        raise ValidationError("postedDate is not a readable timestamp.")

class RequestSchema(Schema):
    """
    Base for request parameter schemas.
    Legacy key names are mapped first; extra parameters such as LOG_LEVEL are ignored.
    """
    class Meta:
        unknown = EXCLUDE

    @pre_load
    def map_legacy_names(self, data, **kwargs):
        return normalize_params(data)

class PostedBySchema(Schema):
    """Comment author. Only `id` is required; any other author keys are kept as sent."""
    class Meta:
        unknown = INCLUDE

    id = fields.Str(required=True, validate=validate.Length(min=1))

class CommentDocumentSchema(Schema):
    """
    One node of a stored comment forest (`comments/{storyId}.json`).
    Loads into a Comment dataclass, replies included, and dumps back to camelCase JSON.
    """
    class Meta:
        unknown = EXCLUDE

    comment_id = fields.Str(required=True, data_key='commentId')
    comment_text = fields.Str(load_default='', data_key='commentText')
    posted_by = fields.Dict(keys=fields.Str(), load_default=dict, data_key='postedBy')
    posted_date = fields.Str(load_default='', data_key='postedDate')
    liked_by = fields.List(fields.Str(), load_default=list, data_key='likedBy')
    replies = fields.List(fields.Nested(lambda: CommentDocumentSchema()), load_default=list)

    @pre_load
    def map_legacy_names(self, data, **kwargs):
        data = normalize_params(data)
        # Absent and null lists are the same thing in stored documents.
        if isinstance(data, dict):
            for key in ('likedBy', 'replies'):
                if data.get(key, ()) is None:
                    data.pop(key)
        return data

    @post_load
    def make_comment(self, data, **kwargs):
        return Comment(**data)

class CommentQuerySchema(RequestSchema):
    """GET /api/comments"""
    story_id = fields.Str(required=True, data_key='storyId', validate=validate_story_id)

class CommentCreateSchema(RequestSchema):
    """
    POST /api/comments
    Creates a comment, or edits the text/author/date of an existing one.
    """
    story_id = fields.Str(required=True, data_key='storyId', validate=validate_story_id)
    comment_id = fields.Str(required=True, data_key='commentId', validate=validate_comment_id)
    comment_text = fields.Str(required=True, data_key='commentText')
    posted_by = fields.Nested(PostedBySchema, required=True, data_key='postedBy')
    posted_date = fields.Str(load_default=None, data_key='postedDate', validate=validate_posted_date)

    @post_load
    def make_comment(self, data, **kwargs):
        return {
            'story_id': data['story_id'],
            'comment': Comment(
                comment_id=data['comment_id'],
                comment_text=data['comment_text'],
                posted_by=data['posted_by'],
                posted_date=data['posted_date'] or now_iso(),
            )
        }

class LikeToggleSchema(RequestSchema):
    """POST /api/comments/like"""
    user_id = fields.Str(required=True, data_key='userId', validate=validate.Length(min=1))
    story_id = fields.Str(required=True, data_key='storyId', validate=validate_story_id)
    comment_id = fields.Str(required=True, data_key='commentId', validate=validate.Length(min=1))
    user_has_liked = fields.Bool(load_default=False, data_key='userHasLiked')
