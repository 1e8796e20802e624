"""Main scaffolding orchestrator.

Takes a package name and generates a clean-architecture feature under
``<project>/feature/<package/path>/`` with four modules (data, domain,
presentation, shared), then registers the modules in ``settings.gradle``.
"""

from __future__ import annotations

from pathlib import Path

from feature_scaffold.config import ScaffoldConfig
from feature_scaffold.utils import ensure_dir, print_warning

from .errors import InvalidPackageNameError, MissingInputError
from .layout import MODULE_CLASS_STUBS, MODULE_FILES, MODULE_SUBPACKAGES, MODULES
from .models import (
    GeneratedFile,
    GenerationPlan,
    GenerationResult,
    ModulePlan,
    PackageName,
)
from .settings import apply_settings_patch, build_settings_patch
from .templates import TemplateRenderer, get_renderer, write_file


class ModuleGenerator:
    """Feature scaffolding orchestrator.

    Given a package name, generates for each of the four modules:
    - the module directory and its fixed subpackage directories
    - the class stubs listed in ``MODULE_CLASS_STUBS``
    - build.gradle, AndroidManifest.xml, .gitignore, gradle.properties and
      proguard-rules.pro

    and finally appends the module ``include`` block to the settings file.

    Directory creation is idempotent.  File writes are not: every run
    overwrites previously generated files and appends another include block.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or get_renderer()

    # -- Public API --------------------------------------------------------

    def plan(self, package_name: str | None) -> GenerationPlan:
        """Compute every directory and rendered file without touching the disk.

        Paths in the plan are relative to the project root.

        Raises:
            MissingInputError: If *package_name* is ``None`` or blank.
            InvalidPackageNameError: If validation is enabled and a segment
                is not a valid identifier.
        """
        package = self._resolve_package(package_name)
        base_dir = Path(self.config.feature_dir) / package.path_form

        modules = [
            self._plan_module(base_dir, package, module) for module in MODULES
        ]
        return GenerationPlan(
            package_name=package.value,
            base_dir=base_dir,
            modules=modules,
            settings_patch=build_settings_patch(package.value),
        )

    def generate(
        self, project_root: str | Path, package_name: str | None
    ) -> GenerationResult:
        """Generate the feature tree under *project_root*.

        Args:
            project_root: Existing, writable project directory.
            package_name: Dot-delimited package, e.g. ``com.example.app``.

        Returns:
            A ``GenerationResult`` listing what was created.  A missing
            settings file is reported on the console and reflected in
            ``settings_updated``; it is not an error.

        Raises:
            MissingInputError: Nothing was written because no package name
                was given.
            InvalidPackageNameError: Nothing was written because the package
                name failed validation.
            OSError: A filesystem operation failed; files created before the
                failure are left in place.
        """
        plan = self.plan(package_name)
        root = Path(project_root)

        directories = [ensure_dir(root / plan.base_dir)]
        files: list[Path] = []

        for module in plan.modules:
            for rel_dir in module.directories:
                directories.append(ensure_dir(root / rel_dir))
            for generated in module.files:
                out = root / generated.relative_path
                write_file(out, generated.content)
                files.append(out)

        settings_path = self.config.settings_path(root)
        updated = apply_settings_patch(settings_path, plan.settings_patch)
        if not updated:
            print_warning(f"{self.config.settings_file} file not found in project root.")

        return GenerationResult(
            package_name=plan.package_name,
            base_dir=root / plan.base_dir,
            directories=directories,
            files=files,
            settings_path=settings_path,
            settings_updated=updated,
        )

    # -- Package validation ------------------------------------------------

    def _resolve_package(self, package_name: str | None) -> PackageName:
        if package_name is None or not package_name.strip():
            raise MissingInputError("No package name given; nothing was generated.")

        package = PackageName(value=package_name.strip())
        if self.config.validate_package_name:
            invalid = package.invalid_segments()
            if invalid:
                raise InvalidPackageNameError(package.value, invalid)
        return package

    # -- Per-module planning -----------------------------------------------

    def _plan_module(
        self, base_dir: Path, package: PackageName, module: str
    ) -> ModulePlan:
        module_dir = base_dir / module
        directories = [module_dir]
        directories.extend(module_dir / sub for sub in MODULE_SUBPACKAGES[module])

        args = (package.value, package.class_stem, module)
        files: list[GeneratedFile] = []

        for stub in MODULE_CLASS_STUBS[module]:
            filename = f"{stub.name.format(stem=package.class_stem)}.{self.config.source_extension}"
            files.append(GeneratedFile(
                relative_path=module_dir / stub.subpackage / filename,
                content=stub.render(*args, renderer=self.renderer),
            ))

        for render, filename in MODULE_FILES:
            files.append(GeneratedFile(
                relative_path=module_dir / filename,
                content=render(*args, renderer=self.renderer),
            ))

        return ModulePlan(name=module, directories=directories, files=files)
