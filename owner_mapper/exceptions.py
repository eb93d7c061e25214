"""Errors that abort an owner-mapping run"""


class OwnerMapperError(Exception):
    """Base class for process-fatal errors"""


class InputNotFoundError(OwnerMapperError):
    """The input document is missing or unreadable"""


class PropertyIdNotFoundError(OwnerMapperError):
    """No property identifier could be determined for the document"""


class UnknownCountyError(OwnerMapperError):
    """No adapter is registered for the requested county"""


class FetchError(OwnerMapperError):
    """The source document could not be downloaded"""
