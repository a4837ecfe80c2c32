class DomainError(Exception):
    """
    Base class for all provisioner exceptions.
    Ensures a consistent exception hierarchy for catching domain-specific issues.
    """

    pass
