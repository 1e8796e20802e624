"""Feature scaffolder -- generates clean-architecture module skeletons.

This module takes a package name and renders a feature directory with four
modules (data, domain, presentation, shared), each holding its subpackages,
class stubs and Gradle build files, then appends the module includes to the
project's ``settings.gradle``.

Quick usage::

    from feature_scaffold.scaffolder import ModuleGenerator

    generator = ModuleGenerator()
    result = generator.generate("/path/to/android-project", "com.example.app")
"""

from feature_scaffold.scaffolder.errors import (
    GenerationError,
    InvalidPackageNameError,
    MissingInputError,
)
from feature_scaffold.scaffolder.generator import ModuleGenerator
from feature_scaffold.scaffolder.models import (
    GeneratedFile,
    GenerationPlan,
    GenerationResult,
    PackageName,
    SettingsPatch,
)
from feature_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratedFile",
    "GenerationError",
    "GenerationPlan",
    "GenerationResult",
    "InvalidPackageNameError",
    "MissingInputError",
    "ModuleGenerator",
    "PackageName",
    "SettingsPatch",
    "TemplateRenderer",
]
