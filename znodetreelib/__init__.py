"""ZNodeTreeLib - Subtree operations for hierarchical coordination services.

ZNodeTreeLib lists, visits and recursively deletes subtrees of a remote
znode namespace through any client implementing ``AsyncZNodeClient``.

Usage:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from znodetreelib.aio import list_subtree_bfs, visit_subtree_dfs, delete_recursive
━━━━━━━━━━━━━━━━━━━━━━━━━━

None of the walks is an atomic snapshot; the recursive delete relies on the
service's multi-op commit to apply every delete or none.
"""

__version__ = "0.1.0"

from .config import (
    ANY_VERSION,
    PATH_SEPARATOR,
    TraversalConfig,
    TraversalStrategy,
)
from .errors import (
    Code,
    KeeperError,
    NoNodeError,
    NodeExistsError,
    NotEmptyError,
    BadVersionError,
    ConnectionLossError,
    SessionExpiredError,
    OperationTimeoutError,
    InvalidPathError,
    TransactionError,
)
from .paths import validate_path, join_path, parent_path, is_root
from . import aio

__all__ = [
    "__version__",
    "aio",
    # Configuration
    "ANY_VERSION",
    "PATH_SEPARATOR",
    "TraversalConfig",
    "TraversalStrategy",
    # Errors
    "Code",
    "KeeperError",
    "NoNodeError",
    "NodeExistsError",
    "NotEmptyError",
    "BadVersionError",
    "ConnectionLossError",
    "SessionExpiredError",
    "OperationTimeoutError",
    "InvalidPathError",
    "TransactionError",
    # Paths
    "validate_path",
    "join_path",
    "parent_path",
    "is_root",
]
