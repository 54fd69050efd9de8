"""Error taxonomy for ZNodeTreeLib.

Remote failures are modelled as a single tagged exception type,
``KeeperError``, whose ``code`` says what kind of failure occurred.
Subclasses exist for the kinds callers commonly match on, so both
``except NoNodeError`` and ``error.code is Code.NONODE`` work.

Local pre-flight failures (bad paths, misuse of a transaction) are plain
Python exceptions and never reach the remote service.
"""

from enum import Enum
from typing import Dict, Optional, Type


class Code(Enum):
    """Result codes reported by the coordination service."""
    OK = 0
    SYSTEMERROR = -1
    RUNTIMEINCONSISTENCY = -2
    DATAINCONSISTENCY = -3
    CONNECTIONLOSS = -4
    MARSHALLINGERROR = -5
    UNIMPLEMENTED = -6
    OPERATIONTIMEOUT = -7
    BADARGUMENTS = -8
    APIERROR = -100
    NONODE = -101
    NOAUTH = -102
    BADVERSION = -103
    NOCHILDRENFOREPHEMERALS = -108
    NODEEXISTS = -110
    NOTEMPTY = -111
    SESSIONEXPIRED = -112
    INVALIDCALLBACK = -113
    INVALIDACL = -114
    AUTHFAILED = -115
    SESSIONMOVED = -118
    NOTREADONLY = -119


class KeeperError(Exception):
    """A failure reported by (or on the way to) the coordination service.

    Attributes:
        code: The ``Code`` tag identifying the kind of failure
        path: The znode path the failing request addressed, if known
    """

    code: Code = Code.SYSTEMERROR

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None,
                 code: Optional[Code] = None):
        if code is not None:
            self.code = code
        self.path = path
        if message is None:
            message = self.code.name
            if path is not None:
                message = f"{message} for {path}"
        super().__init__(message)

    @classmethod
    def create(cls, code: Code, path: Optional[str] = None) -> "KeeperError":
        """Build the most specific error for a result code.

        Args:
            code: Result code returned by the service
            path: Path the failing request addressed

        Returns:
            An instance of the matching ``KeeperError`` subclass, or a plain
            ``KeeperError`` tagged with ``code`` when no subclass exists
        """
        if code is Code.OK:
            raise ValueError("Code.OK does not describe an error")
        error_class = _ERRORS_BY_CODE.get(code)
        if error_class is None:
            return KeeperError(path=path, code=code)
        return error_class(path=path)


class NoNodeError(KeeperError):
    """The addressed node does not exist."""
    code = Code.NONODE


class NodeExistsError(KeeperError):
    """The node being created already exists."""
    code = Code.NODEEXISTS


class NotEmptyError(KeeperError):
    """The node being deleted still has children."""
    code = Code.NOTEMPTY


class BadVersionError(KeeperError):
    """The expected version did not match the node's current version."""
    code = Code.BADVERSION


class ConnectionLossError(KeeperError):
    """The connection to the service was lost before a reply arrived."""
    code = Code.CONNECTIONLOSS


class SessionExpiredError(KeeperError):
    """The client session expired."""
    code = Code.SESSIONEXPIRED


class OperationTimeoutError(KeeperError):
    """The service did not reply in time."""
    code = Code.OPERATIONTIMEOUT


_ERRORS_BY_CODE: Dict[Code, Type[KeeperError]] = {
    error_class.code: error_class
    for error_class in (
        NoNodeError,
        NodeExistsError,
        NotEmptyError,
        BadVersionError,
        ConnectionLossError,
        SessionExpiredError,
        OperationTimeoutError,
    )
}


class InvalidPathError(ValueError):
    """A path was rejected locally before any remote call was issued."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Invalid path string "{path}" caused by {reason}')


class TransactionError(RuntimeError):
    """A transaction was used after it had already been submitted."""
