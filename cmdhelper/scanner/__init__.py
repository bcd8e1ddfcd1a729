"""Scanners: project type, file contents, host toolchain."""

from .content import search_content
from .host import current_os, is_tool_installed
from .project import identify_project_type

__all__ = ["identify_project_type", "search_content", "is_tool_installed", "current_os"]
