"""Batched request builder.

A ``Transaction`` accumulates operations locally and hands them to the
client's ``multi`` in one submission. Nothing is sent before ``commit``.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from ...config import ANY_VERSION
from ...errors import TransactionError


@dataclass(frozen=True)
class DeleteOp:
    """Delete ``path`` if its version matches (``ANY_VERSION`` skips the check)."""
    path: str
    version: int = ANY_VERSION


class Transaction:
    """Ordered batch of operations committed atomically by the service.

    A transaction can be submitted once. ``committed`` is True only after
    the service accepted the batch; ``submitted`` is True once ``commit``
    has been called, whatever the outcome.
    """

    def __init__(self, client: Any):
        """Initialize an empty batch.

        Args:
            client: The client whose ``multi`` will receive the batch
        """
        self._client = client
        self._ops: List[Any] = []
        self._submitted = False
        self._committed = False

    def delete(self, path: str, version: int = ANY_VERSION) -> "Transaction":
        """Append a delete operation.

        Returns:
            This transaction, so calls can be chained
        """
        self._check_open()
        self._ops.append(DeleteOp(path, version))
        return self

    @property
    def operations(self) -> Tuple[Any, ...]:
        """Operations added so far, in submission order."""
        return tuple(self._ops)

    @property
    def submitted(self) -> bool:
        return self._submitted

    @property
    def committed(self) -> bool:
        return self._committed

    def __len__(self) -> int:
        return len(self._ops)

    async def commit(self) -> List[Any]:
        """Submit the batch.

        The service applies every operation or none of them.

        Returns:
            Per-operation results from the client

        Raises:
            TransactionError: If the transaction was already submitted
            KeeperError: If the service rejected the batch
        """
        self._check_open()
        self._submitted = True
        if not self._ops:
            self._committed = True
            return []
        results = await self._client.multi(list(self._ops))
        self._committed = True
        return results

    def _check_open(self) -> None:
        if self._submitted:
            raise TransactionError("Transaction has already been submitted")

    def __repr__(self) -> str:
        return f"Transaction({len(self._ops)} ops, committed={self._committed})"
