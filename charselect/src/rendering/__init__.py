"""Frame resolution, directional selection and preview rig lookup."""

from .frame_resolver import EMPTY_POOL, AssetResolver, FramePool, FramePoolCache, pool_key
from .frame_selector import DirectionalFrameSelector
from .preview_sources import (
    HasIdentifierCode,
    PreviewRigRegistry,
    PreviewRigSource,
    RigEntry,
    rig_frames,
    rig_identifier,
)
from .resolution_strategies import DEFAULT_STRATEGIES, ResolveRequest, prefer_motion

__all__ = [
    "AssetResolver",
    "DEFAULT_STRATEGIES",
    "DirectionalFrameSelector",
    "EMPTY_POOL",
    "FramePool",
    "FramePoolCache",
    "HasIdentifierCode",
    "PreviewRigRegistry",
    "PreviewRigSource",
    "ResolveRequest",
    "RigEntry",
    "pool_key",
    "prefer_motion",
    "rig_frames",
    "rig_identifier",
]
