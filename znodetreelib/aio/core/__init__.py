"""Core abstractions for async subtree operations.

This module defines the remote client interface, the batch builder and the
walkers built on top of them. All remote interaction uses async/await.
"""

from .transaction import DeleteOp, Transaction
from .client import AsyncZNodeClient, Stat
from .traverser import (
    AsyncSubtreeWalker,
    AsyncBreadthFirstLister,
    AsyncDepthFirstVisitor,
)

__all__ = [
    # Client
    'AsyncZNodeClient',
    'Stat',
    # Batches
    'Transaction',
    'DeleteOp',
    # Walkers
    'AsyncSubtreeWalker',
    'AsyncBreadthFirstLister',
    'AsyncDepthFirstVisitor',
]
