"""Asynchronous implementation of ZNodeTreeLib.

Every remote interaction is awaited in turn; nothing is fetched in
parallel, so the order of remote calls is exactly the order documented on
each walker.
"""

# Core abstractions
from .core import (
    AsyncZNodeClient,
    Stat,
    Transaction,
    DeleteOp,
    AsyncSubtreeWalker,
    AsyncBreadthFirstLister,
    AsyncDepthFirstVisitor,
)

# Error handling
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    SkipMissingNodePolicy,
)

# High-level API
from .api import (
    list_subtree_bfs,
    visit_subtree_dfs,
    delete_recursive,
    collect_subtree_dfs,
    count_subtree_nodes,
    get_leaf_paths,
    traverse_subtree,
)

__all__ = [
    # Core abstractions
    'AsyncZNodeClient',
    'Stat',
    'Transaction',
    'DeleteOp',
    # Walkers
    'AsyncSubtreeWalker',
    'AsyncBreadthFirstLister',
    'AsyncDepthFirstVisitor',
    # Error handling
    'ErrorPolicy',
    'FailFastPolicy',
    'SkipMissingNodePolicy',
    # High-level API
    'list_subtree_bfs',
    'visit_subtree_dfs',
    'delete_recursive',
    'collect_subtree_dfs',
    'count_subtree_nodes',
    'get_leaf_paths',
    'traverse_subtree',
]
