"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the business rules of the content workflow; repositories
    only store and fetch.
    """

    pass
