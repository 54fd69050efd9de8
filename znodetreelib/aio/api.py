"""High-level async API for ZNodeTreeLib.

This module provides simple functions for common subtree operations on a
coordination service. Each takes the ``AsyncZNodeClient`` to talk through
and an optional logger; none of them keeps state between calls.

Important: none of these is an atomic snapshot of the tree. Results reflect
the tree as it looked across several round-trips. To get snapshot-like
behaviour, stop writers under the subtree first.
"""

import logging
from typing import Any, List, Optional

from ..config import ANY_VERSION, TraversalConfig, TraversalStrategy
from ..paths import parent_path, validate_path
from .core import (
    AsyncBreadthFirstLister,
    AsyncDepthFirstVisitor,
)
from .core.traverser import VisitFunction
from .error_policies import ErrorPolicy


async def list_subtree_bfs(
    client: Any,
    root: str,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """List ``root`` and all of its descendants in level order.

    Args:
        client: Client to issue ``get_children`` calls through
        root: Path of the subtree root
        logger: Logger for diagnostic tracing

    Returns:
        Paths with ``root`` first, then each level in turn

    Raises:
        InvalidPathError: If ``root`` is malformed
        KeeperError: On any remote failure; no partial result is returned
    """
    lister = AsyncBreadthFirstLister(logger=logger)
    return await lister.list_subtree(client, root)


async def visit_subtree_dfs(
    client: Any,
    root: str,
    visit_fn: VisitFunction,
    watch: bool = False,
    error_policy: Optional[ErrorPolicy] = None,
    logger: Optional[logging.Logger] = None
) -> None:
    """Call ``visit_fn`` for ``root`` and every node below it, depth-first.

    Siblings are visited in sorted order before the walk descends into
    them. A branch whose node is deleted mid-walk is silently cut short.

    Args:
        client: Client to issue remote calls through
        root: Path of the subtree root
        visit_fn: Called with each path; may be a coroutine function
        watch: Ask the service to register watches on every node read
        error_policy: Override which children-fetch failures end a branch
        logger: Logger for diagnostic tracing
    """
    visitor = AsyncDepthFirstVisitor(error_policy=error_policy, logger=logger)
    await visitor.visit(client, root, visit_fn, watch=watch)


async def delete_recursive(
    client: Any,
    root: str,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """Delete ``root`` and everything below it in one atomic batch.

    All versions of every node are deleted. The subtree is listed first,
    then deletes are queued deepest-first so each node follows all of its
    descendants, and the batch is committed once.

    If another client deletes one of the listed nodes, or adds a child to
    one, before the commit, the service rejects the batch and nothing is
    deleted. Retrying is up to the caller.

    Args:
        client: Client to issue remote calls through
        root: Path of the subtree root
        logger: Logger for diagnostic tracing

    Returns:
        The deleted paths, in the order they were deleted

    Raises:
        InvalidPathError: If ``root`` is malformed
        KeeperError: If listing fails or the batch is rejected
    """
    logger = logger or logging.getLogger(__name__)
    validate_path(root)

    lister = AsyncBreadthFirstLister(logger=logger)
    tree = await lister.list_subtree(client, root, validate=False)
    logger.debug("Deleting %s", tree)
    logger.debug("Deleting %d subnodes", len(tree))

    transaction = client.transaction()
    for path in reversed(tree):
        transaction.delete(path, ANY_VERSION)

    await transaction.commit()
    return [op.path for op in transaction.operations]


async def collect_subtree_dfs(
    client: Any,
    root: str,
    watch: bool = False,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """Return the paths ``visit_subtree_dfs`` would visit, in visit order."""
    visited: List[str] = []
    await visit_subtree_dfs(client, root, visited.append, watch=watch, logger=logger)
    return visited


async def count_subtree_nodes(client: Any, root: str, logger: Optional[logging.Logger] = None) -> int:
    """Count ``root`` and its descendants."""
    return len(await list_subtree_bfs(client, root, logger=logger))


async def get_leaf_paths(client: Any, root: str, logger: Optional[logging.Logger] = None) -> List[str]:
    """Return the listed paths that had no listed children, in level order.

    Derived from a single BFS listing, so no extra round-trips are made.
    """
    tree = await list_subtree_bfs(client, root, logger=logger)
    parents = {parent_path(path) for path in tree[1:]}
    return [path for path in tree if path not in parents]


async def traverse_subtree(
    client: Any,
    root: str,
    config: Optional[TraversalConfig] = None,
    logger: Optional[logging.Logger] = None
) -> List[str]:
    """Walk a subtree using the strategy named in ``config``.

    Args:
        client: Client to issue remote calls through
        root: Path of the subtree root
        config: Strategy and watch settings (defaults to breadth-first)
        logger: Logger for diagnostic tracing

    Returns:
        Paths in the chosen traversal order
    """
    config = config or TraversalConfig()
    config.validate()

    if config.strategy is TraversalStrategy.BREADTH_FIRST:
        return await list_subtree_bfs(client, root, logger=logger)
    elif config.strategy is TraversalStrategy.DEPTH_FIRST_PRE:
        return await collect_subtree_dfs(client, root, watch=config.watch, logger=logger)
    else:
        raise ValueError(f"Unknown strategy: {config.strategy}")
