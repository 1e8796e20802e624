"""Gradle settings patching.

The settings file is treated as append-only text: existing content is never
parsed, and a block that is already present is appended again.
"""

from __future__ import annotations

from pathlib import Path

from .layout import MODULES
from .models import SettingsPatch


def build_settings_patch(package_name: str) -> SettingsPatch:
    """Build the five ``include`` directives for a feature.

    The bare ``:feature:<package>`` entry comes first, followed by one entry
    per module in the fixed module order.
    """
    base = f":feature:{package_name}"
    lines = [f"include '{base}'"]
    for module in MODULES:
        lines.append(f"include '{base}:{module}'")
    return SettingsPatch(package_name=package_name, lines=tuple(lines))


def apply_settings_patch(settings_path: Path, patch: SettingsPatch) -> bool:
    """Append *patch* to *settings_path*.

    Returns ``False`` without touching anything when no regular file
    exists at that path; ``True`` once the block has been appended.
    """
    if not settings_path.is_file():
        return False
    with settings_path.open("a", encoding="utf-8") as fh:
        fh.write(patch.text)
    return True
