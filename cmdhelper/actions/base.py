"""Base types for language actions."""

from dataclasses import dataclass
from typing import Callable, Optional

from ..models import Ecosystem, ProjectType

# Supplies one interactive value for a prompt; injectable for tests.
ParameterSource = Callable[[str], str]

_QUOTES = "\"'`"

# Language names users type -> dispatcher key
ECOSYSTEM_ALIASES = {
    "rust": Ecosystem.CARGO.value,
    "js": Ecosystem.NPM.value,
    "javascript": Ecosystem.NPM.value,
    "node": Ecosystem.NPM.value,
    "gradle": Ecosystem.JAVA.value,
    "mvn": Ecosystem.JAVA.value,
    "maven": Ecosystem.JAVA.value,
    "csharp": Ecosystem.DOTNET.value,
    "nuget": Ecosystem.DOTNET.value,
}

PROJECT_ECOSYSTEMS = {
    ProjectType.RUST: Ecosystem.CARGO,
    ProjectType.GRADLE: Ecosystem.JAVA,
    ProjectType.MAVEN: Ecosystem.JAVA,
    ProjectType.PYTHON: Ecosystem.PYTHON,
    ProjectType.JS: Ecosystem.NPM,
    ProjectType.DOTNET: Ecosystem.DOTNET,
    ProjectType.JAVA: Ecosystem.JAVA,
}


@dataclass(frozen=True)
class CommandTemplate:
    """One external invocation. If prompt is set, the answer becomes the last argument."""

    program: str
    args: tuple[str, ...] = ()
    prompt: Optional[str] = None

    def build(self, params: ParameterSource) -> list[str]:
        argv = [self.program, *self.args]
        if self.prompt:
            argv.append(params(self.prompt))
        return argv


def _clean(text: str) -> str:
    return text.strip().strip(_QUOTES).strip().lower()


def normalize_verb(verb: str) -> str:
    """'"Build"' -> 'build'."""
    return _clean(verb)


def normalize_ecosystem(language: str) -> str:
    """Lowercase, unquote and map language names to tool keys (rust -> cargo)."""
    cleaned = _clean(language)
    return ECOSYSTEM_ALIASES.get(cleaned, cleaned)


def ecosystem_for_project(project_type: ProjectType) -> str:
    return PROJECT_ECOSYSTEMS[project_type].value
