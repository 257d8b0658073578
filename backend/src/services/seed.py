"""Seed content written the first time no maps document exists."""

from __future__ import annotations

from ..models.map import Connection, MapData, Node, Position

SEED_MAP_ID = "1"
SEED_MAP_NAME = "Getting Started"
DEFAULT_NODE_SIZE = "100%"


def build_seed_maps() -> list[MapData]:
    """Return the sample collection shown on first launch."""
    return [
        MapData(
            id=SEED_MAP_ID,
            name=SEED_MAP_NAME,
            nodes=[
                Node(
                    id="node-1",
                    position=Position(x=150, y=150),
                    title="Welcome to Andromeda",
                    description=(
                        "This is your first map. Drag nodes around, edit them, "
                        "and connect them to organize your ideas."
                    ),
                    links=["node-2"],
                    files=[],
                    is_done=False,
                    size=DEFAULT_NODE_SIZE,
                    color="#3b82f6",
                ),
                Node(
                    id="node-2",
                    position=Position(x=450, y=300),
                    title="Mark tasks as done",
                    description="Completed nodes are shown as done on the canvas.",
                    links=[],
                    files=[],
                    is_done=True,
                    size=DEFAULT_NODE_SIZE,
                    color="#22c55e",
                ),
            ],
            connections=[Connection(id="conn-1", from_="node-1", to="node-2")],
        )
    ]


__all__ = ["build_seed_maps", "SEED_MAP_ID", "SEED_MAP_NAME", "DEFAULT_NODE_SIZE"]
