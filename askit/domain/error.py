"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a request carries no usable credentials."""

    pass


class ForbiddenError(DomainError):
    """Raised when an authenticated user may not perform an action."""

    pass


class NotAuthorizedError(ForbiddenError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class InsufficientReputationError(ForbiddenError):
    """Raised when a user's reputation is below an action's threshold."""

    def __init__(self, action: str, required: int):
        self.action = action
        self.required = required
        super().__init__(f"You need at least {required} reputation to {action}")


class SelfVoteError(ForbiddenError):
    """Raised when a user votes on their own question or answer."""

    def __init__(self, resource: str):
        super().__init__(f"You cannot vote on your own {resource}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
