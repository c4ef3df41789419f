from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path

try:
    import tomllib as toml
except ImportError:
    try:
        import tomli as toml
    except ImportError:  # pragma: no cover - optional dependency
        toml = None

import yaml

DEFAULT_PORT = 8080


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        if toml is None:
            print("TOML config requires tomllib (Python 3.11+) or tomli.", file=sys.stderr)
            sys.exit(1)
        try:
            data = toml.loads(text)
        except Exception as exc:  # pragma: no cover - depends on parser
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if not isinstance(data, dict):
            print(f"TOML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def port_number(value: object, default: int) -> int:
    """Coerce a port from config or the environment; blanks and junk fall back to ``default``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value or "").strip()
    return int(text) if text.isdigit() else default


def default_port() -> int:
    return port_number(os.environ.get("PORT"), DEFAULT_PORT)


@dataclass
class Settings:
    posts: str = "posts"
    collections: str = "collections"
    static: str = "static"
    templates: str = "templates"
    output: str = "dist"
    robots: str = "robots.txt"
    site_name: str = "BreakLab"
    site_description: str = "Blog posts from BreakLab"
    base_url: str = "https://example.com"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @property
    def posts_dir(self) -> Path:
        return Path(self.posts)

    @property
    def collections_dir(self) -> Path:
        return Path(self.collections)

    @property
    def static_dir(self) -> Path:
        return Path(self.static)

    @property
    def templates_dir(self) -> Path:
        return Path(self.templates)

    @property
    def output_dir(self) -> Path:
        return Path(self.output)

    @property
    def robots_path(self) -> Path:
        return Path(self.robots)


def build_settings(config: dict, **overrides: object) -> Settings:
    """Merge defaults, the ``PORT`` variable, a config mapping and CLI overrides."""
    settings = Settings(port=default_port())
    for item in fields(Settings):
        value = overrides.get(item.name)
        if value is None:
            value = config.get(item.name)
        if value is None:
            continue
        if item.name == "port":
            value = port_number(value, settings.port)
        else:
            value = str(value)
        setattr(settings, item.name, value)
    return settings
