"""Static layout tables for a clean-architecture feature.

Every feature is split into the same four modules.  Which subpackages a
module gets, and which files are rendered into it, is plain data here; the
generator walks these tables and never branches on a module name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from .templates import (
    render_analytics,
    render_analytics_helper,
    render_build_gradle,
    render_event,
    render_gitignore,
    render_gradle_properties,
    render_manifest,
    render_proguard_rules,
    render_repository_impl,
    render_state,
    render_view_model,
)


# (package_name, class_stem, module, *, renderer) -> file content
RenderFn = Callable[..., str]


# ---------------------------------------------------------------------------
# Modules and their subpackages
# ---------------------------------------------------------------------------

MODULES: tuple[str, ...] = ("data", "domain", "presentation", "shared")

MODULE_SUBPACKAGES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "data": ("di", "repository"),
    "domain": ("di", "model", "repository", "usecase", "utils"),
    "presentation": ("analytics", "di", "navigation", "screens", "utils"),
    "shared": ("di", "navigation", "ui", "repository", "usecase"),
})


# ---------------------------------------------------------------------------
# Class stubs
# ---------------------------------------------------------------------------


class ClassStub(NamedTuple):
    """A source file rendered into one of a module's subpackages.

    ``name`` is a ``str.format`` pattern; ``{stem}`` is replaced with the
    capitalised last segment of the package name.
    """

    subpackage: str
    name: str
    render: RenderFn


MODULE_CLASS_STUBS: Mapping[str, tuple[ClassStub, ...]] = MappingProxyType({
    "data": (
        ClassStub("repository", "{stem}RepositoryImpl", render_repository_impl),
    ),
    "domain": (),
    "presentation": (
        ClassStub("screens", "{stem}ViewModel", render_view_model),
        ClassStub("screens", "{stem}Event", render_event),
        ClassStub("screens", "{stem}State", render_state),
        ClassStub("analytics", "Analytics", render_analytics),
        ClassStub("analytics", "AnalyticsHelper", render_analytics_helper),
    ),
    "shared": (),
})


# ---------------------------------------------------------------------------
# Per-module build files (same set, same order, for every module)
# ---------------------------------------------------------------------------

MODULE_FILES: tuple[tuple[RenderFn, str], ...] = (
    (render_build_gradle, "build.gradle"),
    (render_manifest, "AndroidManifest.xml"),
    (render_gitignore, ".gitignore"),
    (render_gradle_properties, "gradle.properties"),
    (render_proguard_rules, "proguard-rules.pro"),
)
