# story_social/api/reactions/routes.py
from flask import Blueprint, request, current_app
from marshmallow import ValidationError

from story_social.api.compat import collect_params
from story_social.api.responses import success, failure, internal_error, VALIDATION_ERROR
from story_social.api.reactions.schemas import ReactionQuerySchema, ReactionSetSchema, ReactionResponseSchema
from story_social.utils.logging_utils import get_request_logger

reactions_bp = Blueprint('reactions_bp', __name__)

@reactions_bp.route('/', methods=['GET'])
def get_reaction():
    """Returns the user's reaction on a story; reaction_name is '' when there is none."""
    params = collect_params(request)
    log = get_request_logger('getReactions', params.get('LOG_LEVEL'))
    reaction_service = current_app.services['reactions']
    try:
        log.info("Starting the getReactions action")
        query = ReactionQuerySchema().load(params)
        reaction_name, document_exists = reaction_service.get_reaction(query['story_id'], query['user_id'], log=log)
        data = ReactionResponseSchema().dump({'reaction_name': reaction_name or ''})
        message = "Data retrieved successfully" if document_exists else "No reaction yet"
        return success(message, data)
    except ValidationError as err:
        log.warning("User ID or Story ID not provided")
        return failure(VALIDATION_ERROR, "User ID or Story ID not provided", 400, err.messages)
    except Exception as e:
        log.error(f"An error occurred while processing the request: {e}", exc_info=True)
        return internal_error()

@reactions_bp.route('/', methods=['POST'])
def set_reaction():
    """
    Sets the user's reaction on a story, replacing any earlier one.
    A user holds at most one reaction per story.
    """
    params = collect_params(request)
    log = get_request_logger('postReaction', params.get('LOG_LEVEL'))
    reaction_service = current_app.services['reactions']
    try:
        log.info("Starting the postReaction action")
        data = ReactionSetSchema().load(params)
        created = reaction_service.set_reaction(data['story_id'], data['user_id'], data['reaction'], log=log)
        if created:
            return success("File created and reaction added successfully.")
        return success("Reaction added successfully.")
    except ValidationError as err:
        log.warning(f"Invalid request: {err.messages}")
        return failure(VALIDATION_ERROR, "User ID, Story ID or reaction not provided", 400, err.messages)
    except Exception as e:
        log.error(f"An error occurred while processing the request: {e}", exc_info=True)
        return internal_error()
