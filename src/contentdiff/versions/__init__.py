# flake8: noqa: F401
"""Version tracking across amendment rounds."""

from contentdiff.versions.content_versions import ContentVersions, ViewMode

__all__ = ["ContentVersions", "ViewMode"]
