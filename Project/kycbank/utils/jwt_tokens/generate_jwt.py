import datetime

import jwt
from flask import current_app


def create_jwt_token(user_id, email=None, role="vendor"):
    """
    Create a JWT token for a user.

    Parameters
    ----------
    user_id : int | str
    email : str
    role : str
        One of "vendor", "service_provider", "admin".

    Returns
    -------
    str
        Encoded JWT token
    """
    payload = {
        "user_id": str(user_id),
        "email": email,
        "role": role,
        "exp": datetime.datetime.now(datetime.timezone.utc)
        + datetime.timedelta(days=current_app.config.get("JWT_EXPIRES_DAYS", 10)),
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET_KEY"], algorithm="HS256")


def decode_jwt_token(token):
    try:
        return jwt.decode(token, current_app.config["JWT_SECRET_KEY"], algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
