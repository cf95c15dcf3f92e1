"""
Parser settings.

Settings can be built in code or loaded from YAML:

    # clop.yaml
    hyphen_arg_error: false
    arg_limit: 40
    styles:
      heading: bold underline
      default: dim
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from rich.errors import StyleSyntaxError
from rich.style import Style

from .console import HELP_THEME
from .exceptions import ConfigError
from .procinfo import DEFAULT_ARG_LIMIT


@dataclass
class ParserConfig:
    """
    Behavior switches for an OptionParser.

    Attributes:
        hyphen_arg_error: Unrecognized "-" arguments raise instead of being
            returned as positional arguments (turn off to accept negative
            numbers as arguments)
        interpret_double_hyphen: "--" ends option processing
        arg_limit: Maximum arguments shown by procinfo
        styles: Help highlight styles, keyed by heading/flags/metavar/default
    """

    hyphen_arg_error: bool = True
    interpret_double_hyphen: bool = True
    arg_limit: int = DEFAULT_ARG_LIMIT
    styles: dict[str, str] = field(default_factory=lambda: dict(HELP_THEME))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserConfig:
        """
        Build a config from a mapping.

        Raises:
            ConfigError: On unknown keys, values of the wrong type, or styles
                rich cannot parse
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("unknown parser config keys", keys=", ".join(unknown))

        config = cls()
        for name in ("hyphen_arg_error", "interpret_double_hyphen"):
            if name in data:
                if not isinstance(data[name], bool):
                    raise ConfigError(f"{name} must be a boolean", value=data[name])
                setattr(config, name, data[name])
        if "arg_limit" in data:
            limit = data["arg_limit"]
            if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
                raise ConfigError(
                    "arg_limit must be a non-negative integer", value=limit
                )
            config.arg_limit = limit
        if "styles" in data:
            styles = data["styles"]
            if not isinstance(styles, dict):
                raise ConfigError("styles must be a mapping", value=styles)
            unknown_roles = sorted(set(styles) - set(HELP_THEME))
            if unknown_roles:
                raise ConfigError(
                    "unknown style roles", roles=", ".join(unknown_roles)
                )
            for role, value in styles.items():
                try:
                    Style.parse(str(value))
                except StyleSyntaxError as e:
                    raise ConfigError(
                        f"invalid style: {e}", role=role, value=value
                    ) from e
            config.styles.update({k: str(v) for k, v in styles.items()})
        return config

    @classmethod
    def from_yaml(cls, path: str | Path) -> ParserConfig:
        """
        Load a config from a YAML file.

        An empty file yields the defaults.

        Raises:
            ConfigError: On invalid YAML or invalid settings
        """
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"invalid YAML in {path}: {e}") from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"parser config in {path} must be a mapping")
        return cls.from_dict(data)
