"""Feature scaffold configuration.

Typed configuration for the generator and CLI.  Settings use a Pydantic v2
model so they are validated at construction time and can be serialised
to/from JSON or built from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


_FALSE_VALUES = {"0", "false", "no", "off"}


class ScaffoldConfig(BaseModel):
    """Global feature scaffold configuration.

    Instances are typically created once by the CLI entry point (from the
    environment or a JSON file) and handed to ``ModuleGenerator``.
    """

    feature_dir: str = Field(
        default="feature", min_length=1,
        description="Directory under the project root that holds feature modules",
    )
    settings_file: str = Field(
        default="settings.gradle", min_length=1,
        description="Gradle settings file the include block is appended to",
    )
    source_extension: str = Field(
        default="kt", min_length=1,
        description="File extension for generated class stubs",
    )
    validate_package_name: bool = Field(
        default=True,
        description="Reject package names with empty or non-identifier segments",
    )

    @field_validator("source_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        stripped = value.lstrip(".")
        if not stripped:
            raise ValueError("source_extension must not be empty")
        return stripped

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def feature_root(self, project_root: Path) -> Path:
        """Directory all features are generated under."""
        return Path(project_root) / self.feature_dir

    def settings_path(self, project_root: Path) -> Path:
        """Location of the Gradle settings file."""
        return Path(project_root) / self.settings_file

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the JSON does not match the model.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            FEATURE_SCAFFOLD_FEATURE_DIR, FEATURE_SCAFFOLD_SETTINGS_FILE,
            FEATURE_SCAFFOLD_SOURCE_EXTENSION, FEATURE_SCAFFOLD_VALIDATE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FEATURE_SCAFFOLD_FEATURE_DIR"):
            kwargs["feature_dir"] = os.environ["FEATURE_SCAFFOLD_FEATURE_DIR"]
        if os.environ.get("FEATURE_SCAFFOLD_SETTINGS_FILE"):
            kwargs["settings_file"] = os.environ["FEATURE_SCAFFOLD_SETTINGS_FILE"]
        if os.environ.get("FEATURE_SCAFFOLD_SOURCE_EXTENSION"):
            kwargs["source_extension"] = os.environ["FEATURE_SCAFFOLD_SOURCE_EXTENSION"]
        if os.environ.get("FEATURE_SCAFFOLD_VALIDATE"):
            flag = os.environ["FEATURE_SCAFFOLD_VALIDATE"].strip().lower()
            kwargs["validate_package_name"] = flag not in _FALSE_VALUES
        return cls(**kwargs)
