# hingad/utils/auth.py
from functools import wraps
from flask import request, jsonify, current_app, g
import jwt

from ..models import User

def _get_user_from_jwt(payload):
    """
    Finds the local user a token was issued for.
    Tokens carry the user id in 'id' (older tokens) or the standard 'sub' claim.
    """
    user_id = payload.get("id", payload.get("sub"))
    if user_id is None:
        return None
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return User.query.filter_by(id=user_id).first()

def _validate_token_and_get_user():
    """Helper function to validate token and set g.user. Returns (success, error)."""
    token = None
    auth_header = request.headers.get("authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ")[1]

    if not token:
        return False, ("Authentication token is missing!", 401)

    secret = current_app.config.get('JWT_SECRET_KEY')
    if not secret:
        current_app.logger.error("JWT_SECRET_KEY is not configured.")
        return False, ("Authentication service is currently unavailable.", 503)

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[current_app.config.get('JWT_ALGORITHM', 'HS256')],
        )
        user = _get_user_from_jwt(payload)
        if not user:
            return False, ("Could not identify user profile.", 401)
        g.user = user
        return True, None
    except jwt.ExpiredSignatureError:
        return False, ("Token has expired!", 401)
    except jwt.InvalidTokenError:
        return False, ("Invalid authentication token!", 401)

def jwt_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        success, error = _validate_token_and_get_user()
        if not success:
            message, code = error
            return jsonify({"error": message}), code
        return f(*args, **kwargs)
    return decorated_function

def role_required(*roles):
    def decorator(f):
        @wraps(f)
        @jwt_required
        def decorated_function(*args, **kwargs):
            if g.user.role not in roles:
                return jsonify({"error": f"Role {' or '.join(roles)} required."}), 403
            return f(*args, **kwargs)
        return decorated_function
    return decorator
