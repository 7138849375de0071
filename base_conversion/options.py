#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: options.py
Version: 1.0

Description:
------------
Options controlling how the Converter prepares input and formats output.
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from loguru import logger

from .exceptions import InvalidArgumentError
from .utils import PathLike

UPPERCASE_ENV_VAR = "BASE_CONVERSION_UPPERCASE"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ConversionOptions:
    """Data class for storing conversion options."""

    # Output case for hexadecimal digits
    uppercase: bool = True

    # When False, surrounding whitespace and a matching radix prefix
    # (0b, 0o, 0x) are stripped before validation
    strict: bool = True

    # Digits per group in the output (0 disables grouping)
    group_output: int = 0
    separator: str = "_"

    def __post_init__(self) -> None:
        for name in ("uppercase", "strict"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidArgumentError(
                    f"{name} must be a bool", **{name: repr(getattr(self, name))}
                )
        if isinstance(self.group_output, bool) or not isinstance(self.group_output, int):
            raise InvalidArgumentError(
                "group_output must be an int", group_output=repr(self.group_output)
            )
        if self.group_output < 0:
            raise InvalidArgumentError(
                "group_output must not be negative", group_output=self.group_output
            )
        if not isinstance(self.separator, str):
            raise InvalidArgumentError(
                "separator must be a str", separator=repr(self.separator)
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(
        cls, options_dict: Dict[str, Any], base: Optional["ConversionOptions"] = None
    ) -> "ConversionOptions":
        """
        Create ConversionOptions from dictionary, ignoring unknown keys.

        Keys missing from ``options_dict`` keep their value from ``base``
        when given, otherwise the field default.

        Raises:
            InvalidArgumentError: If ``options_dict`` is not a mapping or a
                value has the wrong type.
        """
        if not isinstance(options_dict, dict):
            raise InvalidArgumentError(
                "configuration must be a mapping", type=type(options_dict).__name__
            )
        values = base.to_dict() if base is not None else {}
        values.update(
            {k: v for k, v in options_dict.items() if k in cls.__dataclass_fields__}
        )
        return cls(**values)

    @classmethod
    def from_json(
        cls, json_file: PathLike, base: Optional["ConversionOptions"] = None
    ) -> "ConversionOptions":
        """Load options from JSON file."""
        try:
            with open(json_file, "r", encoding="utf-8") as f:
                options_dict = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to load options from JSON file: {str(e)}")
            raise InvalidArgumentError(
                f"invalid JSON configuration: {e}", path=str(json_file)
            ) from e
        except OSError as e:
            logger.error(f"Failed to load options from JSON file: {str(e)}")
            raise
        return cls.from_dict(options_dict, base=base)

    @classmethod
    def from_yaml(
        cls, yaml_file: PathLike, base: Optional["ConversionOptions"] = None
    ) -> "ConversionOptions":
        """Load options from YAML file. An empty document yields no overrides."""
        try:
            import yaml
        except ImportError:
            logger.error(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )
            raise ImportError(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )

        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                options_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to load options from YAML file: {str(e)}")
            raise InvalidArgumentError(
                f"invalid YAML configuration: {e}", path=str(yaml_file)
            ) from e
        except OSError as e:
            logger.error(f"Failed to load options from YAML file: {str(e)}")
            raise
        if options_dict is None:
            options_dict = {}
        return cls.from_dict(options_dict, base=base)

    @classmethod
    def from_env(
        cls, environ: Optional[Dict[str, str]] = None
    ) -> "ConversionOptions":
        """Create options, taking the hex case from BASE_CONVERSION_UPPERCASE if set."""
        environ = os.environ if environ is None else environ
        options = cls()
        raw = environ.get(UPPERCASE_ENV_VAR)
        if raw is not None:
            options.uppercase = raw.strip().lower() not in _FALSE_VALUES
            logger.debug(f"{UPPERCASE_ENV_VAR}={raw!r} -> uppercase={options.uppercase}")
        return options
