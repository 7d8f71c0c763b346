class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class NotFound(ServiceError):
    """The record does not exist or is not visible to the requesting user."""


class CategoryNotFound(NotFound):
    def __init__(self, message: str = "Category not found"):
        super().__init__(message)


class TransactionNotFound(NotFound):
    def __init__(self, message: str = "Transaction not found"):
        super().__init__(message)


class CategoryReadOnly(ServiceError):
    """Default categories cannot be changed or removed by users."""

    def __init__(self, message: str = "Default categories cannot be modified"):
        super().__init__(message)


class Conflict(ServiceError):
    """The operation would break a constraint on existing data."""


class CategoryInUse(Conflict):
    def __init__(self, message: str = "Cannot delete category with existing transactions"):
        super().__init__(message)


class EmailAlreadyRegistered(Conflict):
    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class TypeMismatch(ServiceError):
    """A transaction's type differs from its category's type."""

    def __init__(self, message: str = "Transaction type does not match category type"):
        super().__init__(message)


class InvalidToken(ServiceError):
    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
