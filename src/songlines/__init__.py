"""
Songlines - circles and the lines that join them

A fixed field of hand-drawn circular motifs, linked by songlines that grow,
bloom, and rewind on a 15-second breath.
"""

__version__ = "0.1.0"

from .clock import MasterClock, master_progress, loop_position
from .config import (
    CanvasConfig,
    AnimationConfig,
    NetworkConfig,
    OutputConfig,
    SonglinesConfig,
    ConfigManager,
)
from .errors import SonglinesError, OutputError, BackendUnavailableError
from .layout import Layout, create_fixed_layout, layout_centers
from .motif import Motif, MotifPalette, LayerDurations, LayerProgress, layer_progress
from .network import Segment, SonglineNetwork, prepare_network_lines, network_duration, segment_progress
from .scene import Scene

__all__ = [
    "MasterClock",
    "master_progress",
    "loop_position",
    "CanvasConfig",
    "AnimationConfig",
    "NetworkConfig",
    "OutputConfig",
    "SonglinesConfig",
    "ConfigManager",
    "SonglinesError",
    "OutputError",
    "BackendUnavailableError",
    "Layout",
    "create_fixed_layout",
    "layout_centers",
    "Motif",
    "MotifPalette",
    "LayerDurations",
    "LayerProgress",
    "layer_progress",
    "Segment",
    "SonglineNetwork",
    "prepare_network_lines",
    "network_duration",
    "segment_progress",
    "Scene",
]
