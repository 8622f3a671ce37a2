"""
Errors raised by the storage adapters.
"""

class StorageError(Exception):
    """
    Base class of every error raised by a store.

    Failures reported by the database driver are re-raised as this error (or
    one of its subclasses) with the original exception attached as
    ``__cause__``.
    """
    pass

class StorageConnectionError(StorageError):
    """
    The database could not be reached.
    """
    pass

class NotFoundError(StorageError):
    """
    A lookup by key matched no document.
    """
    pass

class ClientNotFoundError(NotFoundError):
    """
    Error raised by an implementation of
    :class:`oauth2storage.store.ClientStore` if a client does not exist.
    """
    pass

class AuthCodeNotFound(NotFoundError):
    """
    Error indicating that an authorization code could not be read from the
    storage backend by an instance of
    :class:`oauth2storage.store.AuthorizeStore`.
    """
    pass

class AccessTokenNotFound(NotFoundError):
    """
    Error indicating that neither an access token nor a refresh token matched
    a record of :class:`oauth2storage.store.AccessStore`.
    """
    pass

class DecodeError(StorageError):
    """
    A stored document could not be converted into a record.

    :param field: Name of the field that is missing or has the wrong type.
    :param explanation: Short message that describes the error. (optional)
    """
    def __init__(self, field, explanation=None):
        self.field = field
        self.explanation = explanation

        message = "Unable to decode field '%s'" % field
        if explanation is not None:
            message = "%s: %s" % (message, explanation)

        super(DecodeError, self).__init__(message)
