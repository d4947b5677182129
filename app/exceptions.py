"""Custom exception classes"""


class BurnoutBuddyException(Exception):
    """Base exception for the service"""
    pass


class ValidationException(BurnoutBuddyException):
    """Validation errors"""
    pass


class StorageException(BurnoutBuddyException):
    """JSON document store write errors"""
    pass


class ConfigurationException(BurnoutBuddyException):
    """Missing or invalid external configuration (payment link, etc.)"""
    pass
