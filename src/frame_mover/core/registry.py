# src/frame_mover/core/registry.py
from importlib.metadata import entry_points

from fastapi import APIRouter

EP_GROUP = "frame_mover.modules"


def load_module_routers() -> list[APIRouter]:
    """
    Routers advertised under the `frame_mover.modules` entry-point group.
    Falls back to the built-in move router when the package metadata is absent
    (running from a source checkout without installing).
    """
    routers: list[APIRouter] = []
    for ep in entry_points(group=EP_GROUP):
        router = ep.load()
        # Convention: each EP must load to a FastAPI APIRouter
        if isinstance(router, APIRouter):
            routers.append(router)
    if not routers:
        from frame_mover.modules.suffix_move.router import router as move_router

        routers.append(move_router)
    return routers
