"""Helpers for loading runtime configuration profiles."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import CounterError, ErrorCode
from .models import GlobalSettings, ProfileSettings, RuntimeConfig
from .text import parse_target
from .versioning import CONFIG_DOCUMENT_VERSION

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.json"
DEFAULT_PROFILE = "classic"


@dataclass(slots=True)
class ConfigDocument:
    source: Path
    version: int
    global_settings: GlobalSettings
    profiles: Dict[str, ProfileSettings]


def load_runtime_config(
    profile: str = DEFAULT_PROFILE,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, validate it, and resolve a specific profile."""

    document = load_config_document(
        profile_name=profile,
        config_path=config_path,
        overrides=overrides,
    )
    return RuntimeConfig(global_settings=document.global_settings, profile=document.profiles[profile])


def load_config_document(
    *,
    profile_name: Optional[str] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ConfigDocument:
    cfg_path = config_path or DEFAULT_CONFIG_PATH
    raw = _read_config_json(cfg_path)

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    if version > CONFIG_DOCUMENT_VERSION:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"Config version {version} in {cfg_path} is newer than supported ({CONFIG_DOCUMENT_VERSION})",
        )
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise CounterError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {cfg_path}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    global_settings = _build_global_settings(global_data, cfg_path)

    profiles_section = raw.get("profiles")
    if not isinstance(profiles_section, Mapping) or not profiles_section:
        raise CounterError(ErrorCode.CONFIG_ERROR, f"'profiles' section missing in {cfg_path}")

    profile_overrides = overrides.get("profile") or {}
    profiles: Dict[str, ProfileSettings] = {}
    for name, profile_data in profiles_section.items():
        if not isinstance(profile_data, Mapping):
            raise CounterError(
                ErrorCode.CONFIG_ERROR,
                f"Profile '{name}' must be an object in {cfg_path}",
            )
        merged = dict(profile_data)
        if profile_name and name == profile_name and profile_overrides:
            merged = {**merged, **profile_overrides}
        profiles[name] = _build_profile_settings(name, merged, cfg_path)

    if profile_name and profile_name not in profiles:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile_name}' not found in {cfg_path}",
        )

    return ConfigDocument(
        source=cfg_path,
        version=version,
        global_settings=global_settings,
        profiles=profiles,
    )


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:  # pragma: no cover - depends on filesystem
        raise CounterError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise CounterError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    defaults = GlobalSettings()
    prefix_message = _require_message(
        data.get("prefix_message", defaults.prefix_message), "global.prefix_message", source
    )
    suffix_message = _require_message(
        data.get("suffix_message", defaults.suffix_message), "global.suffix_message", source
    )
    return GlobalSettings(prefix_message=prefix_message, suffix_message=suffix_message)


def _build_profile_settings(name: str, data: Mapping[str, Any], source: Path) -> ProfileSettings:
    prefix = f"profiles.{name}"
    required_fields = ("description", "target", "string")
    missing = [field for field in required_fields if field not in data]
    if missing:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{name}' missing fields {missing} in {source}",
        )

    description = _require_string(data.get("description"), f"{prefix}.description", source)
    target_literal = data.get("target")
    if not isinstance(target_literal, str) or not target_literal:
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{prefix}.target must be a non-empty string in {source}")
    try:
        target = parse_target(target_literal)
    except CounterError as exc:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"{prefix}.target is invalid in {source}: {exc.args[0]}",
        ) from exc

    string = data.get("string")
    if not isinstance(string, str):
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{prefix}.string must be a string in {source}")
    if not string.isascii():
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{prefix}.string must be ASCII in {source}")

    return ProfileSettings(description=description, target=target, string=string)


def _require_message(value: Any, field: str, source: Path) -> str:
    # Messages keep their surrounding whitespace; it is part of the rendered sentence.
    if not isinstance(value, str):
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    return value


def _require_string(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    text = value.strip()
    if not text:
        raise CounterError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    try:
        num = int(value)
    except (TypeError, ValueError) as exc:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc
    if num <= 0:
        raise CounterError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num
