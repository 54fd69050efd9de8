"""Testing utilities for ZNodeTreeLib consumers."""

from .fixtures import InMemoryZNodeClient, RecordedCall, ZNode

__all__ = ['InMemoryZNodeClient', 'RecordedCall', 'ZNode']
