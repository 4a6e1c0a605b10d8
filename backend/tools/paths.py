import os

from errors import PathTraversalError


def resolve_path(request_path: str, root: str) -> str:
    """Map a client path onto root. Lexical only: symlinks are not followed."""
    normalized = os.path.normpath(request_path or "")
    # any '..' left after normpath would climb out of root once joined
    if ".." in normalized:
        raise PathTraversalError(f"Path traversal not allowed: {request_path!r}")
    return os.path.join(root, normalized.lstrip(os.sep))
