"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold discussion rules that span more than one entity,
    such as combining a comment's server flags with the viewer's role.
    """

    pass
