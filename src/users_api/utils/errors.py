"""
Error taxonomy shared by the repository, service and HTTP layers
"""

from typing import Any, Dict, List, Optional


class UsersServiceError(Exception):
    """Base class for errors raised below the HTTP layer"""


class ValidationError(UsersServiceError):
    """Malformed or missing input; carries field-level detail"""

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundError(UsersServiceError):
    """The referenced user does not exist"""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class StoreError(UsersServiceError):
    """Connectivity failure, constraint violation or unexpected driver error"""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        detail = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        super().__init__(f"Store operation '{operation}' failed: {detail}")
        self.operation = operation
