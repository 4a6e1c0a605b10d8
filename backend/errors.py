# backend/errors.py


class DataOperationError(Exception):
    """Base class for failures while serving the data endpoint."""


class PathTraversalError(DataOperationError):
    """Client path still contains '..' after normalization."""


class EntryNotFoundError(DataOperationError):
    pass


class UnsupportedEntryTypeError(DataOperationError):
    """Resolved path is neither a regular file nor a directory."""


class EntryReadError(DataOperationError):
    pass
