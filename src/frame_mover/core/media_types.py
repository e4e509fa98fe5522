# src/frame_mover/core/media_types.py
from __future__ import annotations

# Closed set; matching is done on the lowercased suffix.
IMAGE_EXTS: frozenset[str] = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".heic",
        ".gif",
        ".tiff",
        ".tif",
        ".webp",
    }
)
