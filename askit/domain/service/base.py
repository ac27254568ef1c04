"""Base class for AskIt domain services."""


class Service:
    """Base class for domain services.

    Services hold the Q&A rules that span more than one aggregate, for
    example voting on a question while notifying its author. They receive
    repositories through the container and never touch the database session
    directly.
    """
