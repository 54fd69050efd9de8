"""Path validation and construction helpers.

Paths are plain strings. Nothing about the tree is cached locally; a path is
only checked for well-formedness before it is sent to the remote service.
"""

from .config import PATH_SEPARATOR
from .errors import InvalidPathError


# Inclusive code point ranges that may never appear in a node name
_DISALLOWED_RANGES = (
    (0x0001, 0x001F),
    (0x007F, 0x009F),
    (0xD800, 0xF8FF),
    (0xFFF0, 0xFFFF),
)


def _is_disallowed(char: str) -> bool:
    """Check whether a non-null character may never appear in a node name."""
    point = ord(char)
    if point > 0xFFFF:
        # Sent as a UTF-16 surrogate pair, which the service rejects
        return True
    return any(low <= point <= high for low, high in _DISALLOWED_RANGES)


def validate_path(path: str, is_sequential: bool = False) -> None:
    """Validate a znode path.

    Args:
        path: Path to check
        is_sequential: True when the service will append a sequence number,
            in which case a trailing separator is acceptable

    Raises:
        InvalidPathError: If the path is malformed
    """
    if path is None or not isinstance(path, str):
        raise InvalidPathError(path, "path must be a string")
    if len(path) == 0:
        raise InvalidPathError(path, "path length must be > 0")
    if path[0] != PATH_SEPARATOR:
        raise InvalidPathError(path, "path must start with / character")
    if len(path) == 1:
        return

    # A sequential node name is completed by the server, so validate the
    # path as it will eventually look.
    checked = path + '1' if is_sequential else path
    if checked[-1] == PATH_SEPARATOR:
        raise InvalidPathError(path, "path must not end with / character")

    last = PATH_SEPARATOR
    for i in range(1, len(checked)):
        char = checked[i]
        reason = None
        if ord(char) == 0:
            reason = f"null character not allowed @{i}"
        elif _is_disallowed(char):
            reason = f"invalid character @{i}"
        elif char == PATH_SEPARATOR and last == PATH_SEPARATOR:
            reason = f"empty node name specified @{i}"
        elif char == '.' and last == '.':
            if checked[i - 2] == PATH_SEPARATOR and (
                    i + 1 == len(checked) or checked[i + 1] == PATH_SEPARATOR):
                reason = f"relative paths not allowed @{i}"
        elif char == '.':
            if checked[i - 1] == PATH_SEPARATOR and (
                    i + 1 == len(checked) or checked[i + 1] == PATH_SEPARATOR):
                reason = f"relative paths not allowed @{i}"
        if reason is not None:
            raise InvalidPathError(path, reason)
        last = char


def is_root(path: str) -> bool:
    """Return True if ``path`` is the namespace root."""
    return path == PATH_SEPARATOR


def join_path(parent: str, child: str) -> str:
    """Build the full path of ``child`` under ``parent``.

    The root already ends with the separator, so it is not doubled there.
    """
    if is_root(parent):
        return parent + child
    return parent + PATH_SEPARATOR + child


def parent_path(path: str) -> str:
    """Return the parent of ``path`` (the root is its own parent)."""
    if is_root(path):
        return path
    index = path.rindex(PATH_SEPARATOR)
    return path[:index] if index > 0 else PATH_SEPARATOR
