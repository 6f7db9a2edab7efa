"""
Centralized error messages for consistent API responses.

Single source of truth for the text returned in ``{"message": ...}`` bodies.
"""


class ErrorMessages:
    """Centralized error messages for consistent API responses."""

    # Resource not found messages
    RESOURCE_NOT_FOUND = "Resource not found."
    SCENARIO_NOT_FOUND = "Scenario not found"

    # Permission messages
    PERMISSION_DENIED = "Permission denied."
    UNAUTHORIZED = "Authentication required."

    # Validation messages
    BAD_REQUEST = "Bad request."
    VALIDATION_ERROR = "Validation error."
    DUPLICATE_OBJECT_PLACEMENT = "Each object can be placed in only one zone."

    # Store integrity
    ZONE_IN_USE = (
        "This zone is the correct answer for one or more objects and cannot be "
        "deleted."
    )

    # Authentication
    INVALID_CREDENTIALS = "Invalid credentials."
    ACCOUNT_DISABLED = "User account is disabled."
    CREDENTIALS_REQUIRED = "Must include username and password."

