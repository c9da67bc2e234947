"""
Configuration for idtemplate.
Supports YAML files and environment variables.
"""

import logging
import os
import random
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .template import Template


class IdTemplateConfig(BaseModel):
    """Settings for one generation session"""

    # Prefix of all data keys, also the reserved key holding the template
    prefix: str = "T"
    template: Optional[str] = None

    # Caller fields without prefix, e.g. {"f": "John", "l": "Smith"}
    data: Dict[str, str] = Field(default_factory=dict)

    count: int = 1
    seed: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "IdTemplateConfig":
        """Load configuration from YAML file"""
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
        return cls(**config_data)

    @classmethod
    def from_env(cls) -> "IdTemplateConfig":
        """Load configuration from environment variables"""
        config = cls()

        if os.getenv("IDTEMPLATE_PREFIX") is not None:
            config.prefix = os.getenv("IDTEMPLATE_PREFIX")

        if os.getenv("IDTEMPLATE_TEMPLATE"):
            config.template = os.getenv("IDTEMPLATE_TEMPLATE")

        if os.getenv("IDTEMPLATE_COUNT"):
            config.count = int(os.getenv("IDTEMPLATE_COUNT"))

        if os.getenv("IDTEMPLATE_SEED"):
            config.seed = int(os.getenv("IDTEMPLATE_SEED"))

        if os.getenv("IDTEMPLATE_LOG_LEVEL"):
            config.log_level = os.getenv("IDTEMPLATE_LOG_LEVEL").upper()

        return config

    def to_yaml(self, output_path: Union[str, Path]) -> None:
        """Save configuration to YAML file"""
        with open(output_path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if self.count < 1:
            errors.append(f"Count must be at least 1, got {self.count}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        for key in self.data:
            if not key.isalpha() or not key.isascii():
                errors.append(f"Data keys must consist of ASCII letters, got {key!r}")

        return errors

    def prefixed_data(self) -> Dict[str, str]:
        """Caller fields keyed the way the template engine looks them up"""
        return {self.prefix + key: value for key, value in self.data.items()}

    def create_template(self) -> Template:
        """Build a template engine from this configuration"""
        rng = random.Random(self.seed) if self.seed is not None else None
        return Template(
            template=self.template,
            data=self.prefixed_data(),
            prefix=self.prefix,
            rng=rng,
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> IdTemplateConfig:
    """
    Load configuration from file or environment variables.

    Args:
        config_path: Path to YAML configuration file. If None, loads from environment.

    Returns:
        IdTemplateConfig: Loaded configuration

    Raises:
        ValueError: If configuration validation fails
    """
    if config_path:
        config = IdTemplateConfig.from_yaml(config_path)
    else:
        config = IdTemplateConfig.from_env()

    check_config(config)
    return config


def check_config(config: IdTemplateConfig) -> None:
    """
    Raise if the configuration does not validate.

    Raises:
        ValueError: Listing every validation error
    """
    errors = config.validate_config()
    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"- {error}" for error in errors)
        )
