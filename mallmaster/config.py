"""Application configuration loaded from config.yaml + environment variables."""

from __future__ import annotations

import yaml
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml(path: Path = _CONFIG_PATH) -> dict:
    if path.exists():
        with open(path) as f:
            return yaml.safe_load(f) or {}
    return {}


class LatencyConfig(BaseSettings):
    """Simulated fetch delays, in seconds."""
    dashboard_seconds: float = 1.0
    tickets_seconds: float = 1.5
    analytics_seconds: float = 1.2
    refresh_seconds: float = 1.0


class DemoConfig(BaseSettings):
    seed_tickets: bool = True
    seed_stats: bool = True


class AnalyticsConfig(BaseSettings):
    time_range_factors: dict[str, float] = Field(default_factory=lambda: {
        "yesterday": 0.9,
        "week": 5.2,
        "month": 22.7,
    })


class Settings(BaseSettings):
    app_name: str = "MallMaster"
    latency: LatencyConfig = Field(default_factory=LatencyConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MALLMASTER_"}


def get_settings(config_path: Path | None = None) -> Settings:
    """Build Settings by merging YAML defaults with env overrides."""
    y = _load_yaml(config_path or _CONFIG_PATH)
    lat = LatencyConfig(**y.get("latency", {}))
    demo = DemoConfig(**y.get("demo", {}))
    analytics = AnalyticsConfig(**y.get("analytics", {}))
    kwargs = {"latency": lat, "demo": demo, "analytics": analytics}
    if "app_name" in y:
        kwargs["app_name"] = y["app_name"]
    return Settings(**kwargs)
