"""Async subtree walking strategies.

Both walkers issue their remote calls strictly one after another, in the
order described on each class. Neither takes a snapshot: what they report
is the tree as observed across many round-trips, so nodes created or
deleted during a walk may or may not show up.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional, Union

from ...errors import KeeperError
from ...paths import join_path, validate_path
from ..error_policies import ErrorPolicy, SkipMissingNodePolicy


VisitFunction = Callable[[str], Union[Awaitable[None], None]]


async def _call_visit(visit_fn: VisitFunction, path: str) -> None:
    """Invoke a visit callback, awaiting it if it returned an awaitable."""
    result = visit_fn(path)
    if inspect.isawaitable(result):
        await result


class AsyncSubtreeWalker(ABC):
    """Abstract base class for subtree walkers.

    Walkers hold no state about the tree between calls; a single instance
    may be shared by concurrent walks.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize walker.

        Args:
            logger: Logger for diagnostic tracing (defaults to this module's logger)
        """
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    async def iter_subtree(self, client: Any, root: str) -> AsyncIterator[str]:
        """Walk the subtree under ``root``.

        Args:
            client: ``AsyncZNodeClient`` to issue remote calls through
            root: Path of the subtree root

        Yields:
            Paths in traversal order
        """
        pass

    async def list_subtree(self, client: Any, root: str) -> List[str]:
        """Walk the subtree and return every path, in traversal order."""
        return [path async for path in self.iter_subtree(client, root)]


class AsyncBreadthFirstLister(AsyncSubtreeWalker):
    """Level-order listing of a subtree.

    The root comes first, then each level in turn. Within a level, nodes
    keep the order in which their parents were dequeued and children keep
    the order the service returned them in.

    Any remote error aborts the listing.
    """

    async def iter_subtree(
        self,
        client: Any,
        root: str,
        validate: bool = True
    ) -> AsyncIterator[str]:
        """Yield ``root`` and its descendants in level order.

        Args:
            client: ``AsyncZNodeClient`` to issue remote calls through
            root: Path of the subtree root
            validate: Check ``root`` first; pass False when the caller
                already validated it
        """
        if validate:
            validate_path(root)

        queue = deque([root])
        yield root

        while queue:
            path = queue.popleft()
            children = await client.get_children(path)
            self.logger.debug("Listed %d children of %s", len(children), path)
            for child in children:
                child_path = join_path(path, child)
                queue.append(child_path)
                yield child_path

    async def list_subtree(self, client: Any, root: str, validate: bool = True) -> List[str]:
        """Return ``root`` and its descendants in level order."""
        return [path async for path in self.iter_subtree(client, root, validate=validate)]


class AsyncDepthFirstVisitor(AsyncSubtreeWalker):
    """Depth-first walk calling a visit function for every node.

    For each node, all of its children are visited (sorted by path) before
    the walk descends into any of them, so ``/a`` with children ``b`` and
    ``d``, where ``b`` has child ``c``, is visited as
    ``/a, /a/b, /a/d, /a/b/c``.

    Failures of the per-node children fetch go through an error policy.
    Without an injected policy each walk gets its own
    ``SkipMissingNodePolicy``, which ends a branch quietly when its node was
    deleted mid-walk and re-raises anything else. An injected policy is
    shared by every walk of this visitor.
    """

    def __init__(
        self,
        error_policy: Optional[ErrorPolicy] = None,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize visitor.

        Args:
            error_policy: Decides which children-fetch failures end a branch
            logger: Logger for diagnostic tracing
        """
        super().__init__(logger)
        self.error_policy = error_policy

    def new_walk_policy(self) -> ErrorPolicy:
        """Return the policy for one walk."""
        if self.error_policy is not None:
            return self.error_policy
        return SkipMissingNodePolicy(logger=self.logger)

    async def visit(
        self,
        client: Any,
        root: str,
        visit_fn: VisitFunction,
        watch: bool = False
    ) -> None:
        """Visit ``root`` and every node below it.

        Args:
            client: ``AsyncZNodeClient`` to issue remote calls through
            root: Path of the subtree root
            visit_fn: Called with each discovered path; may be a coroutine function
            watch: Passed through to ``get_data`` and ``get_children``

        Raises:
            InvalidPathError: If ``root`` is malformed
            KeeperError: If ``root`` does not exist, or a remote call fails in
                a way the error policy does not absorb
        """
        validate_path(root)
        policy = self.new_walk_policy()

        await client.get_data(root, watch=watch)
        await _call_visit(visit_fn, root)
        await self._visit_below(client, root, visit_fn, watch, policy)

    async def _visit_below(
        self,
        client: Any,
        path: str,
        visit_fn: VisitFunction,
        watch: bool,
        policy: ErrorPolicy
    ) -> None:
        try:
            children = await client.get_children(path, watch=watch)
        except KeeperError as error:
            children = await policy.handle(error, 'get_children', path)

        child_paths = sorted(join_path(path, child) for child in children)

        for child_path in child_paths:
            await _call_visit(visit_fn, child_path)

        for child_path in child_paths:
            await self._visit_below(client, child_path, visit_fn, watch, policy)

    async def iter_subtree(self, client: Any, root: str) -> AsyncIterator[str]:
        """Yield paths in visit order.

        The whole walk runs before the first path is yielded.
        """
        visited: List[str] = []
        await self.visit(client, root, visited.append)
        for path in visited:
            yield path
