"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class SnapshotNotFoundError(DomainException):
    """No snapshot stored under the requested key"""

    pass


class InvalidBackupError(DomainException):
    """Backup document is malformed or missing required sections"""

    pass
