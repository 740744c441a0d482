"""
Configuration - canvas, timing, network, and output settings.

All defaults reproduce the reference artwork: 15-second loop, 800/1200/1500 ms
layer windows, songlines staggered by 150 ms and grown over 800 ms.
A YAML (or JSON) file can override any subset of them.
"""

import json
import sys
import yaml
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple, Optional, Dict, Any

from .display.design import TIMING


@dataclass
class CanvasConfig:
    """Canvas size and background texture."""
    width: int = 800
    height: int = 800
    background_dots: bool = True
    dot_density: float = 0.004  # Dots per square pixel

    @property
    def size(self) -> int:
        """The artwork is square: the smaller side wins."""
        return min(self.width, self.height)

    def validate(self) -> Tuple[bool, Optional[str]]:
        if self.width < 0 or self.height < 0:
            return False, "canvas width and height must be non-negative"
        if not (0 <= self.dot_density <= 1):
            return False, "dot_density must be 0-1"
        return True, None


@dataclass
class AnimationConfig:
    """Master loop and per-layer reveal windows (milliseconds)."""
    loop_duration_ms: float = TIMING.LOOP_DURATION_MS
    inner_duration_ms: float = TIMING.INNER_DURATION_MS
    middle_duration_ms: float = TIMING.MIDDLE_DURATION_MS
    outer_duration_ms: float = TIMING.OUTER_DURATION_MS

    def validate(self) -> Tuple[bool, Optional[str]]:
        for name in ("loop_duration_ms", "inner_duration_ms", "middle_duration_ms", "outer_duration_ms"):
            if getattr(self, name) <= 0:
                return False, f"{name} must be positive"
        return True, None


@dataclass
class NetworkConfig:
    """Songline network settings."""
    line_delay_ms: float = TIMING.LINE_DELAY_MS
    line_grow_ms: float = TIMING.LINE_GROW_MS
    distance_divisor: float = 2.8      # Connect if distance < width / divisor
    connect_probability: float = 0.7   # Chance a motif becomes a node
    line_width: float = 10.0

    def validate(self) -> Tuple[bool, Optional[str]]:
        if self.line_delay_ms < 0:
            return False, "line_delay_ms must be non-negative"
        if self.line_grow_ms <= 0:
            return False, "line_grow_ms must be positive"
        if self.distance_divisor <= 0:
            return False, "distance_divisor must be positive"
        if not (0 <= self.connect_probability <= 1):
            return False, "connect_probability must be 0-1"
        if self.line_width <= 0:
            return False, "line_width must be positive"
        return True, None


@dataclass
class OutputConfig:
    """Offline rendering settings."""
    fps: float = 30.0
    frames: int = 450  # One full loop at 30 fps
    seed: Optional[int] = None  # None = fresh instance every run

    def validate(self) -> Tuple[bool, Optional[str]]:
        if self.fps <= 0:
            return False, "fps must be positive"
        if self.frames < 0:
            return False, "frames must be non-negative"
        return True, None


@dataclass
class SonglinesConfig:
    """Complete configuration."""
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "canvas": asdict(self.canvas),
            "animation": asdict(self.animation),
            "network": asdict(self.network),
            "output": asdict(self.output),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SonglinesConfig":
        """Create from dictionary. Missing or empty sections get defaults."""
        data = data or {}
        if not isinstance(data, dict):
            raise TypeError(f"config must be a mapping, got {type(data).__name__}")

        def section(name: str) -> Dict[str, Any]:
            value = data.get(name) or {}
            if not isinstance(value, dict):
                raise TypeError(f"config section '{name}' must be a mapping, got {type(value).__name__}")
            return value

        return cls(
            canvas=CanvasConfig(**section("canvas")),
            animation=AnimationConfig(**section("animation")),
            network=NetworkConfig(**section("network")),
            output=OutputConfig(**section("output")),
        )

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate entire configuration."""
        for name in ("canvas", "animation", "network", "output"):
            valid, error = getattr(self, name).validate()
            if not valid:
                return False, f"{name}: {error}"
        return True, None


class ConfigManager:
    """Loads and saves configuration files."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (default: songlines.yaml in current dir)
        """
        if config_path is None:
            config_path = Path("songlines.yaml")
        self.config_path = Path(config_path)
        self._config: Optional[SonglinesConfig] = None

    def _is_yaml(self) -> bool:
        return self.config_path.suffix in (".yaml", ".yml")

    def load(self, force_reload: bool = False) -> SonglinesConfig:
        """Load configuration from file or return defaults."""
        if self._config is not None and not force_reload:
            return self._config

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    data = yaml.safe_load(f) if self._is_yaml() else json.load(f)

                self._config = SonglinesConfig.from_dict(data)

                valid, error = self._config.validate()
                if not valid:
                    print(f"[Config] Warning: Invalid config, using defaults: {error}", file=sys.stderr, flush=True)
                    self._config = SonglinesConfig()
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                print(f"[Config] Error loading config, using defaults: {e}", file=sys.stderr, flush=True)
                self._config = SonglinesConfig()
        else:
            self._config = SonglinesConfig()

        return self._config

    def save(self, config: Optional[SonglinesConfig] = None) -> bool:
        """
        Save configuration to file.

        Returns:
            True if saved successfully
        """
        if config is None:
            config = self._config or self.load()

        valid, error = config.validate()
        if not valid:
            print(f"[Config] Cannot save invalid config: {error}", file=sys.stderr, flush=True)
            return False

        try:
            data = config.to_dict()
            with open(self.config_path, "w") as f:
                if self._is_yaml():
                    yaml.dump(data, f, default_flow_style=False, sort_keys=False)
                else:
                    json.dump(data, f, indent=2)
            self._config = config
            return True
        except OSError as e:
            print(f"[Config] Error saving config: {e}", file=sys.stderr, flush=True)
            return False

    def reload(self) -> SonglinesConfig:
        """Force reload configuration from file."""
        self._config = None
        return self.load()
