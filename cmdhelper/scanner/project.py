"""Project type identifier — classifies one directory by its marker files."""

from pathlib import Path

import structlog

from ..errors import UnknownProjectType
from ..models import ProjectType

log = structlog.get_logger(__name__)

# Priority order: first match wins.
PROJECT_MARKERS: list[tuple[ProjectType, tuple[str, ...]]] = [
    (ProjectType.RUST, ("Cargo.toml",)),
    (ProjectType.GRADLE, ("build.gradle", "build.gradle.kts")),
    (ProjectType.MAVEN, ("pom.xml",)),
    (ProjectType.PYTHON, ("requirements.txt", "main.py", "config.py")),
    (ProjectType.JS, ("package.json",)),
    (ProjectType.DOTNET, ("*.csproj", "*.sln")),
    (ProjectType.JAVA, ("*.java", "*.jar", "*.zar")),
]


def _marker_exists(directory: Path, pattern: str) -> bool:
    """True if pattern (plain name or `*` glob) matches an entry directly in directory."""
    if "*" in pattern or "?" in pattern:
        found = next(directory.glob(pattern), None) is not None
    else:
        found = (directory / pattern).exists()
    log.debug("marker probe", path=str(directory / pattern), found=found)
    return found


def identify_project_type(path: str | Path) -> ProjectType:
    """
    Classify path into a ProjectType; raise UnknownProjectType when nothing matches.

    A directory whose own name contains a tag (e.g. 'python-notes') is
    classified by name before any file is looked at. This heuristic can
    misfire on unrelated folders and is kept on purpose.
    """
    directory = Path(path).resolve()
    name = directory.name
    for ptype, patterns in PROJECT_MARKERS:
        if ptype.value in name or any(_marker_exists(directory, p) for p in patterns):
            log.info("identified project type", project_type=ptype.value, path=str(directory))
            return ptype
    log.warning("unknown project type", path=str(directory))
    raise UnknownProjectType(directory)
