# exceptions.py
# Error taxonomy shared by services and the auth layer.
# Every error carries a human-readable message and the HTTP status it maps to.


class LigasError(Exception):
    """Base exception for all domain errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(LigasError):
    """Raised when a referenced entity id does not exist"""
    status_code = 404

    def __init__(self, kind: str, entity_id):
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class InvalidArgument(LigasError):
    """Raised for structurally invalid requests (same team twice, league mismatch, negative score)"""
    status_code = 400


class Conflict(LigasError):
    """Raised when an operation clashes with the current state (re-finalization, coach already assigned)"""
    status_code = 409


class Unauthorized(LigasError):
    """Raised when credentials or tokens are missing or invalid"""
    status_code = 401


class Forbidden(LigasError):
    """Raised when the caller lacks the required role"""
    status_code = 403
