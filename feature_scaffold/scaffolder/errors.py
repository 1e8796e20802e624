"""Exceptions raised by the feature scaffolder.

Filesystem failures are not wrapped: an ``OSError`` from a mkdir or write
propagates to the caller as-is and leaves whatever was already created on disk.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when a feature cannot be generated from the given input."""

    def __init__(self, message: str, package_name: str | None = None) -> None:
        self.package_name = package_name
        super().__init__(message)


class MissingInputError(GenerationError):
    """No package name was supplied (cancelled prompt, empty string)."""


class InvalidPackageNameError(GenerationError):
    """The package name has empty or non-identifier segments."""

    def __init__(self, package_name: str, invalid_segments: list[str]) -> None:
        self.invalid_segments = invalid_segments
        shown = ", ".join(repr(s) for s in invalid_segments)
        super().__init__(
            f"Invalid package name '{package_name}': bad segment(s) {shown}",
            package_name=package_name,
        )
