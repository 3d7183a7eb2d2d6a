from functools import wraps

from flask import g, jsonify, request

from kycbank.utils.jwt_tokens.generate_jwt import decode_jwt_token


def token_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith("Bearer "):
            return jsonify({"error": "Missing Authorization header"}), 401

        token = auth_header.split(" ", 1)[1]
        payload = decode_jwt_token(token)
        if not payload:
            return jsonify({"error": "Invalid token"}), 401

        user_id = payload.get("user_id")
        if not user_id:
            return jsonify({"error": "Invalid token"}), 401

        g.user_id = user_id
        g.user_email = payload.get("email")

        return func(*args, **kwargs)

    return wrapper
