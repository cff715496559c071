"""Configuration model and loaders for subfixer.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SubfixerConfig`: normalized settings for one fix run.
- `ConfigLoader`: static construction helpers for `SubfixerConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .io.storage import DEFAULT_ENCODING, DEFAULT_OUTPUT_SUFFIX
from .parsing import normalize_optional_string


@dataclass(slots=True)
class SubfixerConfig:
    """Runtime configuration for one fix run.

    Attributes:
        input_path: Path to the source subtitle file.
        output_dir: Optional directory for the fixed file; defaults to the source folder.
        encoding: Text encoding used to read the source subtitle; output is UTF-8.
        output_suffix: Suffix replacing the source suffix in the output file name.
    """

    input_path: Path
    output_dir: Path | None = None
    encoding: str = DEFAULT_ENCODING
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    def validate(self) -> None:
        """Validate configuration values before pipeline execution."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc
        if not self.output_suffix.startswith(".") or self.output_suffix == ".":
            raise ValueError(
                "`output_suffix` must start with `.` and contain at least one more character."
            )
        if "/" in self.output_suffix or "\\" in self.output_suffix:
            raise ValueError("`output_suffix` must not contain path separators.")


class ConfigLoader:
    """Factory methods for creating `SubfixerConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_dir",
            "encoding",
            "output_suffix",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> SubfixerConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SubfixerConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_value = ConfigLoader._optional_env_string(env_map, "SUBFIXER_INPUT_PATH")
        if input_value is None:
            raise ValueError("Environment variable `SUBFIXER_INPUT_PATH` is required.")
        output_dir = ConfigLoader._optional_env_string(env_map, "SUBFIXER_OUTPUT_DIR")
        encoding = (
            ConfigLoader._optional_env_string(env_map, "SUBFIXER_ENCODING") or DEFAULT_ENCODING
        )
        output_suffix = (
            ConfigLoader._optional_env_string(env_map, "SUBFIXER_OUTPUT_SUFFIX")
            or DEFAULT_OUTPUT_SUFFIX
        )

        config = SubfixerConfig(
            input_path=Path(input_value),
            output_dir=Path(output_dir) if output_dir is not None else None,
            encoding=encoding,
            output_suffix=output_suffix,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> SubfixerConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        input_value = ConfigLoader._optional_non_empty_string(payload, "input_path")
        if input_value is None:
            raise ValueError(f"{source_label} requires non-empty `input_path`.")
        output_dir = ConfigLoader._optional_non_empty_string(payload, "output_dir")
        encoding = (
            ConfigLoader._optional_non_empty_string(payload, "encoding") or DEFAULT_ENCODING
        )
        output_suffix = (
            ConfigLoader._optional_non_empty_string(payload, "output_suffix")
            or DEFAULT_OUTPUT_SUFFIX
        )

        config = SubfixerConfig(
            input_path=Path(input_value),
            output_dir=Path(output_dir) if output_dir is not None else None,
            encoding=encoding,
            output_suffix=output_suffix,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))
