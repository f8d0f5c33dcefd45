from pitcher.application.processors.post import extract, extract_header, log_payload, log_step
from pitcher.application.processors.pre import JWT_KEY, bearer_auth, jwt_auth, set_header, update_session

__all__ = [
    "JWT_KEY",
    "bearer_auth",
    "jwt_auth",
    "set_header",
    "update_session",
    "extract",
    "extract_header",
    "log_payload",
    "log_step",
]
