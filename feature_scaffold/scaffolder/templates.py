"""Jinja2 template rendering for feature module scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``feature_scaffold/scaffolder/templates/`` directory and renders them with a
small context (package name, class-name stem, module name).

The ``render_*`` functions at the bottom of this module are pure: each one
returns the text of a single generated file and never touches the disk, so
template output can be checked without running the generator.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for feature module scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary
    that contains ``package_name``, ``class_stem`` and ``module``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"presentation/ViewModel.kt.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and always use
        forward slashes, matching the names Jinja2 expects.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Return the shared renderer bound to the bundled template directory."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Pure render functions
# ---------------------------------------------------------------------------


def build_context(
    package_name: str, class_stem: str = "", module: str = ""
) -> dict[str, Any]:
    """Build the template context shared by every template."""
    return {
        "package_name": package_name,
        "class_stem": class_stem,
        "module": module,
    }


def _render(
    template_path: str,
    package_name: str,
    class_stem: str,
    module: str,
    renderer: TemplateRenderer | None,
) -> str:
    renderer = renderer or get_renderer()
    return renderer.render(template_path, build_context(package_name, class_stem, module))


# Every render function shares one signature so the layout tables can hold
# them directly: (package_name, class_stem, module, *, renderer).


def render_repository_impl(
    package_name: str, class_stem: str, module: str = "data",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("data/RepositoryImpl.kt.j2", package_name, class_stem, module, renderer)


def render_view_model(
    package_name: str, class_stem: str, module: str = "presentation",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("presentation/ViewModel.kt.j2", package_name, class_stem, module, renderer)


def render_event(
    package_name: str, class_stem: str, module: str = "presentation",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("presentation/Event.kt.j2", package_name, class_stem, module, renderer)


def render_state(
    package_name: str, class_stem: str, module: str = "presentation",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("presentation/State.kt.j2", package_name, class_stem, module, renderer)


def render_analytics(
    package_name: str, class_stem: str = "", module: str = "presentation",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("presentation/Analytics.kt.j2", package_name, class_stem, module, renderer)


def render_analytics_helper(
    package_name: str, class_stem: str = "", module: str = "presentation",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render(
        "presentation/AnalyticsHelper.kt.j2", package_name, class_stem, module, renderer
    )


def render_manifest(
    package_name: str, class_stem: str = "", module: str = "",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    """Render the manifest stub whose package attribute is ``<package>.<module>``."""
    return _render("module/AndroidManifest.xml.j2", package_name, class_stem, module, renderer)


def render_build_gradle(
    package_name: str = "", class_stem: str = "", module: str = "",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    """Static library build script, identical for every module."""
    return _render("module/build.gradle.j2", package_name, class_stem, module, renderer)


def render_gitignore(
    package_name: str = "", class_stem: str = "", module: str = "",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("module/gitignore.j2", package_name, class_stem, module, renderer)


def render_gradle_properties(
    package_name: str = "", class_stem: str = "", module: str = "",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("module/gradle.properties.j2", package_name, class_stem, module, renderer)


def render_proguard_rules(
    package_name: str = "", class_stem: str = "", module: str = "",
    *, renderer: TemplateRenderer | None = None,
) -> str:
    return _render("module/proguard-rules.pro.j2", package_name, class_stem, module, renderer)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
