from .exceptions import (
    AuthenticationException,
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "ConflictException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "AuthenticationException",
]
