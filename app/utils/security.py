# app/utils/security.py
from werkzeug.security import generate_password_hash, check_password_hash

from app.utils.settings import PASSWORD_HASH_METHOD


def hash_password(password: str) -> str:
    # salt generowany dla kazdego hasla osobno
    return generate_password_hash(password, method=PASSWORD_HASH_METHOD)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)
