class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StateConflictError(DomainError):
    """Raised when an operation does not fit the caller's current shift state."""


class AlreadyRegistered(StateConflictError):
    def __init__(self, identity: str):
        super().__init__("You are already registered!")
        self.identity = identity


class NotRegistered(StateConflictError):
    def __init__(self, identity: str):
        super().__init__("You are not registered yet.")
        self.identity = identity


class AlreadyClockedIn(StateConflictError):
    def __init__(self, identity: str):
        super().__init__("You are already clocked in!")
        self.identity = identity


class NotClockedIn(StateConflictError):
    def __init__(self, identity: str):
        super().__init__("You are not clocked in!")
        self.identity = identity


class PersistenceError(Exception):
    """Raised by snapshot codecs when stored content cannot be read or written."""
