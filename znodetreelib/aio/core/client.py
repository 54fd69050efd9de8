"""Async coordination-service client abstraction.

Defines the remote capabilities the tree algorithms rely on. A real
client library (or the in-memory fixture in ``znodetreelib.testing``)
implements this interface; session management, the wire protocol and
watch delivery all live behind it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from .transaction import Transaction


@dataclass(frozen=True)
class Stat:
    """Subset of a znode's metadata returned alongside its data."""
    version: int = 0
    cversion: int = 0
    num_children: int = 0


class AsyncZNodeClient(ABC):
    """Abstract base class for async coordination-service clients.

    Every method is a single remote round-trip. Failures are reported
    as ``KeeperError`` subclasses.
    """

    @abstractmethod
    async def get_children(self, path: str, watch: bool = False) -> List[str]:
        """Get the names of a node's children.

        Args:
            path: Node whose children to list
            watch: Ask the service to register a child watch on ``path``

        Returns:
            Child names (not full paths) in the order the service returned them

        Raises:
            NoNodeError: If ``path`` does not exist
        """
        pass

    @abstractmethod
    async def get_data(self, path: str, watch: bool = False) -> Tuple[bytes, Stat]:
        """Get a node's data and metadata.

        Args:
            path: Node to read
            watch: Ask the service to register a data watch on ``path``

        Raises:
            NoNodeError: If ``path`` does not exist
        """
        pass

    @abstractmethod
    async def multi(self, ops: Sequence[Any]) -> List[Any]:
        """Submit a batch of operations for all-or-nothing commit.

        Args:
            ops: Operations, in the order the service must apply them

        Returns:
            One result per operation

        Raises:
            KeeperError: The first error encountered; no operation was applied
        """
        pass

    def transaction(self) -> Transaction:
        """Start building a batch bound to this client."""
        return Transaction(self)

    async def close(self):
        """Clean up client resources.

        Override if the client holds a connection.
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
