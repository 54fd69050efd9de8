"""Test fixtures for ZNodeTreeLib consumers.

``InMemoryZNodeClient`` is a small in-process stand-in for a coordination
service. It implements ``AsyncZNodeClient`` with the service's rules
(no orphan nodes, no deleting non-empty nodes, all-or-nothing batches),
records every remote call, and lets a test inject failures or mutate the
tree between round-trips to simulate other clients.

Example:
    client = InMemoryZNodeClient()
    client.populate("/a/b/c", "/a/d")

    # Simulate another client deleting /a/b mid-walk
    client.schedule("get_children", "/a/b", lambda c: c.remove_tree("/a/b"))

    visited = await collect_subtree_dfs(client, "/a")
    assert visited == ["/a", "/a/b", "/a/d"]
"""

import copy
import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..aio.core.client import AsyncZNodeClient, Stat
from ..aio.core.transaction import DeleteOp
from ..config import ANY_VERSION, PATH_SEPARATOR
from ..errors import (
    BadVersionError,
    Code,
    KeeperError,
    NodeExistsError,
    NoNodeError,
    NotEmptyError,
)
from ..paths import is_root, join_path, parent_path, validate_path


@dataclass
class ZNode:
    """A node held by the in-memory service."""
    data: bytes = b""
    version: int = 0
    cversion: int = 0
    children: List[str] = field(default_factory=list)

    def stat(self) -> Stat:
        return Stat(version=self.version, cversion=self.cversion,
                    num_children=len(self.children))


@dataclass
class RecordedCall:
    """One remote call as seen by the service."""
    method: str
    path: Optional[str]
    watch: bool = False


class InMemoryZNodeClient(AsyncZNodeClient):
    """In-memory coordination service implementing ``AsyncZNodeClient``.

    Children are returned in creation order. The local mutators
    (``create``, ``delete``, ``remove_tree``, ``set_data``) are not recorded
    as calls; they model changes made by other clients.
    """

    def __init__(self):
        self.nodes: Dict[str, ZNode] = {PATH_SEPARATOR: ZNode()}
        self.calls: List[RecordedCall] = []
        self.committed: List[List[Any]] = []
        self.watches: List[Tuple[str, str]] = []
        self._scheduled: Dict[Tuple[str, str], List[Callable]] = {}
        self._failures: Dict[Tuple[str, str], Exception] = {}

    # Mutators used to arrange a scenario

    def create(self, path: str, data: bytes = b"", make_parents: bool = False) -> str:
        """Create a node.

        Raises:
            NodeExistsError: If the node already exists
            NoNodeError: If the parent is missing and ``make_parents`` is False
        """
        validate_path(path)
        if path in self.nodes:
            raise NodeExistsError(path=path)
        parent = parent_path(path)
        if parent not in self.nodes:
            if not make_parents:
                raise NoNodeError(path=parent)
            self.create(parent, make_parents=True)
        self.nodes[path] = ZNode(data=data)
        self._link(parent, path)
        return path

    def populate(self, *paths: str) -> None:
        """Create each path, along with any missing ancestors."""
        for path in paths:
            if path not in self.nodes:
                self.create(path, make_parents=True)

    def delete(self, path: str, version: int = ANY_VERSION) -> None:
        """Delete a single node, following the service's rules."""
        self._delete_from(self.nodes, path, version)

    def remove_tree(self, path: str) -> None:
        """Remove a node and all of its descendants, deepest first."""
        node = self.nodes.get(path)
        if node is None:
            raise NoNodeError(path=path)
        for child in list(node.children):
            self.remove_tree(join_path(path, child))
        self.delete(path)

    def set_data(self, path: str, data: bytes) -> None:
        node = self._get(self.nodes, path)
        node.data = data
        node.version += 1

    def exists(self, path: str) -> bool:
        return path in self.nodes

    # Hooks

    def schedule(self, method: str, path: str, action: Callable[["InMemoryZNodeClient"], Any]) -> None:
        """Run ``action(self)`` once, just before the next ``method`` call on ``path``.

        ``action`` may be a coroutine function. Use it to simulate a
        concurrent change between two round-trips.
        """
        self._scheduled.setdefault((method, path), []).append(action)

    def fail_next(self, method: str, path: str, error: Exception) -> None:
        """Make the next ``method`` call on ``path`` raise ``error``."""
        self._failures[(method, path)] = error

    def calls_to(self, method: str) -> List[str]:
        """Paths addressed by recorded calls to ``method``, in call order."""
        return [call.path for call in self.calls if call.method == method]

    # AsyncZNodeClient

    async def get_children(self, path: str, watch: bool = False) -> List[str]:
        await self._enter("get_children", path, watch)
        node = self._get(self.nodes, path)
        if watch:
            self.watches.append(("child", path))
        return list(node.children)

    async def get_data(self, path: str, watch: bool = False) -> Tuple[bytes, Stat]:
        await self._enter("get_data", path, watch)
        node = self._get(self.nodes, path)
        if watch:
            self.watches.append(("data", path))
        return node.data, node.stat()

    async def multi(self, ops: Sequence[Any]) -> List[Any]:
        await self._enter("multi", None, False)
        scratch = copy.deepcopy(self.nodes)
        for op in ops:
            if isinstance(op, DeleteOp):
                self._delete_from(scratch, op.path, op.version)
            else:
                raise KeeperError(f"Unsupported operation {op!r}", code=Code.UNIMPLEMENTED)
        self.nodes = scratch
        self.committed.append(list(ops))
        return [True for _ in ops]

    # Internals

    async def _enter(self, method: str, path: Optional[str], watch: bool) -> None:
        self.calls.append(RecordedCall(method, path, watch))
        key = (method, path)
        for action in self._scheduled.pop(key, []):
            result = action(self)
            if inspect.isawaitable(result):
                await result
        error = self._failures.pop(key, None)
        if error is not None:
            raise error

    @staticmethod
    def _get(nodes: Dict[str, ZNode], path: str) -> ZNode:
        node = nodes.get(path)
        if node is None:
            raise NoNodeError(path=path)
        return node

    def _link(self, parent: str, path: str) -> None:
        parent_node = self.nodes[parent]
        parent_node.children.append(path.rsplit(PATH_SEPARATOR, 1)[1])
        parent_node.cversion += 1

    @classmethod
    def _delete_from(cls, nodes: Dict[str, ZNode], path: str, version: int) -> None:
        if is_root(path):
            raise KeeperError("The root node cannot be deleted", path=path, code=Code.BADARGUMENTS)
        node = cls._get(nodes, path)
        if version != ANY_VERSION and version != node.version:
            raise BadVersionError(path=path)
        if node.children:
            raise NotEmptyError(path=path)
        del nodes[path]
        parent_node = nodes[parent_path(path)]
        parent_node.children.remove(path.rsplit(PATH_SEPARATOR, 1)[1])
        parent_node.cversion += 1
