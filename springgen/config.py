"""springgen configuration.

Centralised, typed settings for template constants and command-line
defaults.  All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Global springgen settings.

    The version fields feed the generated build descriptors and readme; the
    remaining fields are only consulted by the command line.  Instances are
    typically created once by the CLI entry point and passed to the
    generator.
    """

    spring_boot_version: str = Field(default="2.7.0")
    dependency_management_version: str = Field(default="1.0.11.RELEASE")
    java_version: str = Field(default="11")
    project_version: str = Field(
        default="0.0.1-SNAPSHOT", description="Version of the generated artifact"
    )

    output_dir: Path = Field(default=Path("."), description="Where archives are written")
    log_level: LogLevel = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Settings`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            SPRINGGEN_SPRING_BOOT_VERSION, SPRINGGEN_JAVA_VERSION,
            SPRINGGEN_OUTPUT_DIR, SPRINGGEN_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SPRINGGEN_SPRING_BOOT_VERSION"):
            kwargs["spring_boot_version"] = os.environ["SPRINGGEN_SPRING_BOOT_VERSION"]
        if os.environ.get("SPRINGGEN_JAVA_VERSION"):
            kwargs["java_version"] = os.environ["SPRINGGEN_JAVA_VERSION"]
        if os.environ.get("SPRINGGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SPRINGGEN_OUTPUT_DIR"])
        if os.environ.get("SPRINGGEN_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["SPRINGGEN_LOG_LEVEL"].upper()
        return cls(**kwargs)
