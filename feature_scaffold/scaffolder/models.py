"""Pydantic v2 models for the feature scaffolder.

All models are transient value objects built fresh on every run from the
user-supplied package name and the static layout tables.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from feature_scaffold.utils import capitalize_first


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Java reserved words plus Kotlin hard keywords; none can name a package.
RESERVED_WORDS: frozenset[str] = frozenset({
    "_", "abstract", "as", "assert", "boolean", "break", "byte", "case",
    "catch", "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "false", "final", "finally", "float", "for",
    "fun", "goto", "if", "implements", "import", "in", "instanceof", "int",
    "interface", "is", "long", "native", "new", "null", "object", "package",
    "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "true", "try", "typealias", "typeof", "val", "var", "void",
    "volatile", "when", "while",
})


# ---------------------------------------------------------------------------
# Package name
# ---------------------------------------------------------------------------

class PackageName(BaseModel):
    """A dot-delimited package identifier such as ``com.example.app``."""

    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def segments(self) -> list[str]:
        return self.value.split(".")

    @property
    def path_form(self) -> Path:
        """Relative directory path with one directory per segment.

        Empty segments are dropped so that a leading dot can never turn the
        path absolute.
        """
        return Path(*[s for s in self.segments if s])

    @property
    def last_segment(self) -> str:
        return self.segments[-1]

    @property
    def class_stem(self) -> str:
        """Last segment with its first character upper-cased."""
        return capitalize_first(self.last_segment)

    def invalid_segments(self) -> list[str]:
        """Return every segment that is not a valid Java/Kotlin identifier."""
        return [
            s for s in self.segments
            if not _IDENTIFIER_RE.match(s) or s in RESERVED_WORDS
        ]


# ---------------------------------------------------------------------------
# Generated artefacts
# ---------------------------------------------------------------------------

class GeneratedFile(BaseModel):
    """A rendered file; ``relative_path`` is relative to the project root."""

    model_config = ConfigDict(frozen=True)

    relative_path: Path
    content: str


class SettingsPatch(BaseModel):
    """``include`` directives appended verbatim to the settings file."""

    model_config = ConfigDict(frozen=True)

    package_name: str
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n" + "\n".join(self.lines)


class ModulePlan(BaseModel):
    """Directories and files for one module, in creation order."""

    name: str
    directories: list[Path] = Field(default_factory=list)
    files: list[GeneratedFile] = Field(default_factory=list)


class GenerationPlan(BaseModel):
    """Everything ``generate`` would create for a package, computed without I/O."""

    package_name: str
    base_dir: Path
    modules: list[ModulePlan] = Field(default_factory=list)
    settings_patch: SettingsPatch

    @property
    def directories(self) -> list[Path]:
        dirs = [self.base_dir]
        for module in self.modules:
            dirs.extend(module.directories)
        return dirs

    @property
    def files(self) -> list[GeneratedFile]:
        return [f for module in self.modules for f in module.files]


class GenerationResult(BaseModel):
    """Outcome of a successful ``generate`` call (absolute paths)."""

    package_name: str
    base_dir: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)
    settings_path: Path
    settings_updated: bool = False
