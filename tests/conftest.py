"""Shared pytest fixtures for the feature scaffold test suite.

Provides reusable fixtures for:
- Temporary Android project roots (with and without settings.gradle)
- A default ModuleGenerator
- The expected directory layout for ``com.example.app``
"""

from __future__ import annotations

from pathlib import Path

import pytest

from feature_scaffold.config import ScaffoldConfig
from feature_scaffold.scaffolder import ModuleGenerator


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary Android project root without a settings file."""
    project_dir = tmp_path / "android-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def settings_project(tmp_project_dir: Path) -> Path:
    """Project root whose ``settings.gradle`` contains ``existing``."""
    (tmp_project_dir / "settings.gradle").write_text("existing", encoding="utf-8")
    return tmp_project_dir


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig()


@pytest.fixture
def generator(config: ScaffoldConfig) -> ModuleGenerator:
    return ModuleGenerator(config)


# ---------------------------------------------------------------------------
# Expected layout
# ---------------------------------------------------------------------------

@pytest.fixture
def expected_app_dirs() -> set[str]:
    """Every directory generated for ``com.example.app`` (POSIX, relative)."""
    base = "feature/com/example/app"
    subpackages = {
        "data": ["di", "repository"],
        "domain": ["di", "model", "repository", "usecase", "utils"],
        "presentation": ["analytics", "di", "navigation", "screens", "utils"],
        "shared": ["di", "navigation", "ui", "repository", "usecase"],
    }
    dirs = {"feature", "feature/com", "feature/com/example", base}
    for module, subs in subpackages.items():
        dirs.add(f"{base}/{module}")
        dirs.update(f"{base}/{module}/{sub}" for sub in subs)
    return dirs


@pytest.fixture
def expected_app_files() -> set[str]:
    """Every file generated for ``com.example.app`` (POSIX, relative)."""
    base = "feature/com/example/app"
    files: set[str] = set()
    for module in ("data", "domain", "presentation", "shared"):
        for name in (
            "build.gradle",
            "AndroidManifest.xml",
            ".gitignore",
            "gradle.properties",
            "proguard-rules.pro",
        ):
            files.add(f"{base}/{module}/{name}")
    files.add(f"{base}/data/repository/AppRepositoryImpl.kt")
    files.update({
        f"{base}/presentation/screens/AppViewModel.kt",
        f"{base}/presentation/screens/AppEvent.kt",
        f"{base}/presentation/screens/AppState.kt",
        f"{base}/presentation/analytics/Analytics.kt",
        f"{base}/presentation/analytics/AnalyticsHelper.kt",
    })
    return files


@pytest.fixture
def relative_tree():
    """Callable returning ``(directories, files)`` under a root.

    Paths are relative POSIX strings; the settings file at the root is
    excluded from the file set.
    """

    def _collect(root: Path) -> tuple[set[str], set[str]]:
        dirs: set[str] = set()
        files: set[str] = set()
        for path in root.rglob("*"):
            rel = path.relative_to(root).as_posix()
            if path.is_dir():
                dirs.add(rel)
            elif rel != "settings.gradle":
                files.add(rel)
        return dirs, files

    return _collect
