"""
Configuration parser for Weekgrid.

Handles TOML file parsing into the layout, week and color settings.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from .event_model import EventType, EVENT_TYPE_VALUES
from .logger_config import get_logger

logger = get_logger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for hour-grid geometry."""
    standard_hour_height: float = 4.0  # Height of an hour that hosts or borders an event
    compact_hour_height: float = 2.0   # Height of an empty hour
    unit: str = "rem"                  # Length unit of heights and offsets
    default_event_width: float = 95.0  # Percent width of an event with no collisions
    group_width: float = 98.0          # Percent width shared by the columns of a collision group
    single_z_index: int = 1
    group_z_index_base: int = 2

    def validate(self):
        """Raise ValueError for settings the layout engine cannot use."""
        if self.standard_hour_height <= 0 or self.compact_hour_height <= 0:
            raise ValueError("Hour heights must be positive")
        if not 0 < self.default_event_width <= 100:
            raise ValueError(f"default_event_width out of range: {self.default_event_width}")
        if not 0 < self.group_width <= 100:
            raise ValueError(f"group_width out of range: {self.group_width}")


@dataclass
class WeekConfig:
    """Configuration for the visible week and its day names."""
    first_weekday: int = 6  # 0=Monday ... 6=Sunday
    day_names: list[str] = None  # Mon Tue Wed Thu Fri Sat Sun

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def validate(self):
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be 0-6, got {self.first_weekday}")
        if len(self.day_names) != 7:
            raise ValueError(f"day_names needs 7 entries, got {len(self.day_names)}")

    def get_day_name(self, weekday: int) -> str:
        """Get day name for weekday (0=Monday, 6=Sunday)."""
        return self.day_names[weekday] if 0 <= weekday < len(self.day_names) else ""


@dataclass
class ColorsConfig:
    """Display color per event type."""
    work: str = "#3b82f6"       # Blue
    personal: str = "#ec4899"   # Pink
    meeting: str = "#f97316"    # Orange
    social: str = "#a855f7"     # Purple
    health: str = "#22c55e"     # Green
    travel: str = "#6366f1"     # Indigo
    education: str = "#eab308"  # Yellow
    default: str = "#6b7280"    # Gray, for types without a color

    def for_type(self, event_type) -> str:
        """Get the color for an event type, falling back to the default color."""
        key = event_type.value if isinstance(event_type, EventType) else str(event_type)
        if key in EVENT_TYPE_VALUES:
            return getattr(self, key)
        return self.default


@dataclass
class Config:
    """Main configuration container for Weekgrid."""

    timezone: str = ""  # Empty for the system timezone
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    week: WeekConfig = field(default_factory=WeekConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    source_path: Optional[Path] = None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'weekgrid' / 'weekgrid.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from TOML file."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        logger.debug("Config sections in %s: %s", config_path, list(data.keys()))
        config = cls.from_dict(data)
        config.source_path = config_path
        return config

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Build a Config from parsed TOML tables; missing keys keep their defaults."""
        # Parse General section
        general = data.get('General', {})
        timezone = general.get('timezone', '')

        # Parse Layout section
        layout_data = data.get('Layout', {})
        layout = LayoutConfig(
            standard_hour_height=float(layout_data.get('standard_hour_height', LayoutConfig.standard_hour_height)),
            compact_hour_height=float(layout_data.get('compact_hour_height', LayoutConfig.compact_hour_height)),
            unit=layout_data.get('unit', LayoutConfig.unit),
            default_event_width=float(layout_data.get('default_event_width', LayoutConfig.default_event_width)),
            group_width=float(layout_data.get('group_width', LayoutConfig.group_width)),
            single_z_index=int(layout_data.get('single_z_index', LayoutConfig.single_z_index)),
            group_z_index_base=int(layout_data.get('group_z_index_base', LayoutConfig.group_z_index_base)),
        )
        layout.validate()

        # Parse Week section; day names are an array or a space-separated string
        week_data = data.get('Week', {})
        day_names = week_data.get('day_names')
        if isinstance(day_names, str):
            day_names = day_names.split()
        elif day_names is not None:
            day_names = [str(name) for name in day_names]
        week = WeekConfig(
            first_weekday=int(week_data.get('first_weekday', WeekConfig.first_weekday)),
            day_names=day_names or None,
        )
        week.validate()

        # Parse Colors section
        colors_data = data.get('Colors', {})
        colors = ColorsConfig(**{
            name: colors_data.get(name, getattr(ColorsConfig, name))
            for name in ColorsConfig.__dataclass_fields__
        })
        unknown = set(colors_data) - set(ColorsConfig.__dataclass_fields__)
        if unknown:
            logger.warning("Ignoring unknown [Colors] keys: %s", ", ".join(sorted(unknown)))

        return cls(
            timezone=timezone,
            layout=layout,
            week=week,
            colors=colors,
        )
