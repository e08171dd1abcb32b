# edgeblog/auth/decorators.py
from functools import wraps

from flask import g, request

from edgeblog.auth.tokens import decode_token
from edgeblog.errors import Unauthorized


def get_request_token():
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip() or None
    return request.headers.get("x-auth-token") or None


def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        token = get_request_token()
        if not token:
            raise Unauthorized("No authentication token, authorization denied.")

        g.current_user = decode_token(token)
        return f(*args, **kwargs)
    return decorated
