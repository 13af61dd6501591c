# story_social/api/comments/routes.py
from flask import Blueprint, request, current_app
from marshmallow import ValidationError

from story_social.api.compat import collect_params
from story_social.api.responses import success, failure, internal_error, VALIDATION_ERROR, NOT_FOUND
from story_social.api.comments.schemas import CommentQuerySchema, CommentCreateSchema, LikeToggleSchema
from story_social.services.storage_service import DocumentNotFoundError
from story_social.utils.logging_utils import get_request_logger

comments_bp = Blueprint('comments_bp', __name__)

@comments_bp.route('/', methods=['GET'])
def get_comments():
    """
    Returns the comment forest of a story.
    A story nobody has commented on yet returns an empty list.
    """
    params = collect_params(request)
    log = get_request_logger('getComments', params.get('LOG_LEVEL'))
    comment_service = current_app.services['comments']
    try:
        query = CommentQuerySchema().load(params)
        comments = comment_service.get_comments(query['story_id'], log=log)
        return success("Data retrieved successfully", comments)
    except ValidationError as err:
        log.warning(f"Invalid request: {err.messages}")
        return failure(VALIDATION_ERROR, "Story ID not provided or invalid.", 400, err.messages)
    except Exception as e:
        log.error(f"An error occurred while reading comments: {e}", exc_info=True)
        return internal_error()

@comments_bp.route('/', methods=['POST'])
def post_comment():
    """
    Creates a comment or a reply, or edits an existing comment.
    - A commentId like "3.1" is stored as a reply to comment "3".
    - Editing keeps the comment's replies and likes.
    - Responds 201 when this was the story's first comment, 200 otherwise.
    """
    params = collect_params(request)
    log = get_request_logger('postComment', params.get('LOG_LEVEL'))
    comment_service = current_app.services['comments']
    try:
        data = CommentCreateSchema().load(params)
        comments, created = comment_service.save_comment(data['story_id'], data['comment'], log=log)
        return success("Data updated successfully.", comments, 201 if created else 200)
    except ValidationError as err:
        log.warning(f"Invalid request: {err.messages}")
        return failure(VALIDATION_ERROR, "Story ID, comment ID or comment fields are missing.", 400, err.messages)
    except Exception as e:
        log.error(f"An error occurred while saving a comment: {e}", exc_info=True)
        return internal_error()

@comments_bp.route('/like', methods=['POST'])
def toggle_like():
    """
    Likes (userHasLiked=true) or unlikes a comment.
    Both directions are idempotent. A story without comments is a 404.
    """
    params = collect_params(request)
    log = get_request_logger('likeForComment', params.get('LOG_LEVEL'))
    comment_service = current_app.services['comments']
    try:
        data = LikeToggleSchema().load(params)
        comments = comment_service.set_like(
            data['story_id'], data['comment_id'], data['user_id'], data['user_has_liked'], log=log
        )
        return success("Data updated successfully.", comments)
    except ValidationError as err:
        log.warning(f"Invalid request: {err.messages}")
        return failure(VALIDATION_ERROR, "User ID, story ID, or comment ID is missing.", 400, err.messages)
    except DocumentNotFoundError as e:
        return failure(NOT_FOUND, str(e), 404)
    except Exception as e:
        log.error(f"An error occurred while processing the request: {e}", exc_info=True)
        return internal_error()
