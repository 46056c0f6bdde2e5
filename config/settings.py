"""Global settings for the line graph viewer."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict
import yaml

logger = logging.getLogger(__name__)


@dataclass
class DisplaySettings:
    """Display and window settings."""
    window_width: int = 1300
    window_height: int = 520
    graph_x: int = 40
    graph_y: int = 40
    fps_target: int = 30
    font_size: int = 18
    title: str = "Line Graph"


@dataclass
class GraphConfig:
    """Graph dimensions and axis tick count."""
    width: int = 1200
    height: int = 400
    padding: int = 45
    tick_count: int = 10


@dataclass
class Settings:
    """Main settings container."""
    display: DisplaySettings = field(default_factory=DisplaySettings)
    graph: GraphConfig = field(default_factory=GraphConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """Load settings from YAML file, falling back to defaults."""
        settings = cls()

        if config_path and config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}

            for section_name, section_data in data.items():
                section = getattr(settings, section_name, None)
                if section is None or not isinstance(section_data, dict):
                    logger.warning(f"Ignoring unknown settings section '{section_name}'")
                    continue
                _apply_section(section, section_name, section_data)

        return settings

    def save(self, config_path: Path) -> None:
        """Save current settings to YAML file."""
        data = {
            "display": _section_dict(self.display),
            "graph": _section_dict(self.graph),
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _apply_section(section: Any, section_name: str, values: Dict[str, Any]) -> None:
    for key, value in values.items():
        if hasattr(section, key):
            setattr(section, key, value)
        else:
            logger.warning(f"Ignoring unknown setting '{section_name}.{key}'")


def _section_dict(section: Any) -> Dict[str, Any]:
    return {f.name: getattr(section, f.name) for f in fields(section)}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance."""
    global _settings
    if _settings is None:
        config_path = Path(__file__).parent / "graph.yaml"
        _settings = Settings.load(config_path)
    return _settings
