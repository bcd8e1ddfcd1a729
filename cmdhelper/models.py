"""Structured results shared by the scanner, the dispatcher and the CLI."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class ProjectType(str, Enum):
    """Ecosystem tags the identifier can produce, in priority order."""

    RUST = "rust"
    GRADLE = "gradle"
    MAVEN = "mvn"
    PYTHON = "python"
    JS = "js"
    DOTNET = "dotnet"
    JAVA = "java"


class Ecosystem(str, Enum):
    """Dispatcher keys. These are tool names, not language names."""

    JAVA = "java"
    PYTHON = "python"
    DOTNET = "dotnet"
    CARGO = "cargo"
    NPM = "npm"


class DispatchStatus(str, Enum):
    EXECUTED = "executed"
    UNSUPPORTED_ECOSYSTEM = "unsupported_ecosystem"
    UNSUPPORTED_VERB = "unsupported_verb"


@dataclass(frozen=True)
class ActionRequest:
    """A normalized (ecosystem, verb) pair."""

    ecosystem: str
    verb: str


@dataclass
class DispatchResult:
    """Outcome of a dispatch call that did not terminate the run."""

    request: ActionRequest
    status: DispatchStatus
    message: str
    argv: list[str] = field(default_factory=list)
    supported_verbs: list[str] = field(default_factory=list)
    exit_code: Optional[int] = None

    @property
    def executed(self) -> bool:
        return self.status == DispatchStatus.EXECUTED


@dataclass
class FileMatches:
    """Matching lines of a single file: [(line_number, line_text), ...]."""

    path: Path
    lines: list[tuple[int, str]] = field(default_factory=list)
