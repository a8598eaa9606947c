from .exceptions import (
    BusinessRuleViolationException,
    CapacityExceededException,
    DomainException,
    DuplicateFlightException,
    DuplicateResourceException,
    OptimisticLockException,
    PersistenceFailureException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "CapacityExceededException",
    "DuplicateResourceException",
    "DuplicateFlightException",
    "PersistenceFailureException",
    "OptimisticLockException",
]
