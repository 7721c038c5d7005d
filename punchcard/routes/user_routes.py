from flask import Blueprint, current_app, request
from punchcard.exceptions import ApiError
from punchcard.routes.responses import error_response, success, unexpected_error
from punchcard.services import UserService

user_bp = Blueprint("user", __name__)


@user_bp.route("/AttemptLogin", methods=["POST"])
def attempt_login():
    current_app.logger.info("Attempt login")
    try:
        user = UserService.attempt_login(request.get_json(silent=True))
        return success(user=user.to_dict())
    except ApiError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error("Attempt login", e)
