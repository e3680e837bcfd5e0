# app/domain/errors.py


class StoreError(Exception):
    """Bazowy blad domenowy, status_code mowi routerom jaki kod HTTP zwrocic."""

    status_code = 500


class ValidationError(StoreError):
    status_code = 400


class AuthError(StoreError):
    status_code = 400


class ConflictError(StoreError):
    status_code = 400


class NotFoundError(StoreError):
    status_code = 404


class PermissionDeniedError(StoreError):
    status_code = 403


class InternalError(StoreError):
    status_code = 500
