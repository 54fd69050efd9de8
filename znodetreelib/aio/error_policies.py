"""
Error handling policies for ZNodeTreeLib.

This module decides, through the Policy pattern, which remote failures a
subtree walk may absorb. Policies only ever look at the error's ``code``
tag; any kind they do not explicitly accept is re-raised unchanged.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..errors import Code, KeeperError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    raised by remote calls during a walk.
    """

    @abstractmethod
    async def handle(self, error: Exception, method_name: str, path: Optional[str]) -> Any:
        """
        Handle an error raised by a remote call.

        Args:
            error: The exception that was raised
            method_name: Name of the client method that failed (e.g., 'get_children')
            path: The path the failing call addressed

        Returns:
            A default value that lets the walk continue,
            or re-raises the exception to stop the walk.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the walk.

    Used where no failure is benign, such as the BFS listing that feeds a
    recursive delete.
    """

    async def handle(self, error: Exception, method_name: str, path: Optional[str]) -> Any:
        """Re-raise the error immediately."""
        raise error


class SkipMissingNodePolicy(ErrorPolicy):
    """
    Policy that treats a vanished node as the end of its branch.

    A node listed by its parent may be deleted by another client before its
    own children are fetched. Only that case (``Code.NONODE`` from
    ``get_children``) is absorbed, yielding no children; every other error
    is re-raised unchanged.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the policy.

        Args:
            logger: Logger for skipped branches (defaults to this module's logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.skipped_paths: List[str] = []

    async def handle(self, error: Exception, method_name: str, path: Optional[str]) -> Any:
        if (
            isinstance(error, KeeperError)
            and error.code is Code.NONODE
            and method_name == 'get_children'
        ):
            self.skipped_paths.append(path)
            self.logger.debug("Node %s vanished before its children were listed; skipping branch", path)
            return []
        raise error
