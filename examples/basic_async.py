#!/usr/bin/env python3
"""
Basic example of ZNodeTreeLib against the in-memory coordination service.

This example demonstrates:
- Level-order listing of a subtree
- Depth-first visiting, with another client deleting a node mid-walk
- Atomic recursive delete, and what happens when it races a writer
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from znodetreelib import KeeperError
from znodetreelib.aio import delete_recursive, list_subtree_bfs, visit_subtree_dfs
from znodetreelib.testing import InMemoryZNodeClient


async def main():
    """Demonstrate listing, visiting and deleting a subtree."""
    client = InMemoryZNodeClient()
    client.populate(
        "/services/api/instances/i-1",
        "/services/api/instances/i-2",
        "/services/api/config",
        "/services/web/instances/i-9",
    )

    print("Breadth-first listing:")
    for path in await list_subtree_bfs(client, "/services"):
        print(f"  {path}")

    # Another client removes /services/web before the walk reaches it
    client.schedule("get_children", "/services/web", lambda c: c.remove_tree("/services/web"))

    async def show(path):
        print(f"  visit {path}")

    print("\nDepth-first visit:")
    await visit_subtree_dfs(client, "/services", show)

    # A writer adds a node between listing and commit; nothing is deleted
    client.schedule("multi", None, lambda c: c.create("/services/api/instances/i-3"))
    try:
        await delete_recursive(client, "/services/api")
    except KeeperError as error:
        print(f"\nDelete rejected ({error.code.name}); {len(client.nodes)} nodes remain")

    deleted = await delete_recursive(client, "/services")
    print(f"Retried delete removed {len(deleted)} nodes")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    print("ZNodeTreeLib - Basic Async Example")
    print("=" * 50)
    asyncio.run(main())
