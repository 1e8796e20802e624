"""Clean-architecture feature module scaffolding for Android projects."""

from feature_scaffold.config import ScaffoldConfig
from feature_scaffold.scaffolder import ModuleGenerator

__version__ = "0.1.0"

__all__ = ["ModuleGenerator", "ScaffoldConfig", "__version__"]
