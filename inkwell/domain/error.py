"""Domain layer errors.

Stores report a missing post or comment as None or False rather than
raising. NotFoundError is raised by use cases that need to tell a missing
target apart from a denied one.
"""


class DomainError(Exception):
    """Base domain error."""


class ValidationError(DomainError):
    """A required field is missing or blank."""


class NotAuthorizedError(DomainError):
    """The requesting user does not own the content they tried to change."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(f"User {user_id} may not modify {resource} {resource_id}")


class NotFoundError(DomainError):
    """The post or comment a use case acts on does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} does not exist")
