"""Installation hints and optional auto-install for missing toolchains."""

from dataclasses import dataclass, field
from typing import Callable

import structlog

from .errors import DispatchError
from .scanner.host import resolve_program

log = structlog.get_logger(__name__)

_LINUX_PYTHON = [
    "Use your package manager:",
    "  Ubuntu/Debian: sudo apt install python3",
    "  Fedora: sudo dnf install python3",
    "  Arch: sudo pacman -S python",
]

# tool -> package name per package manager family
_PACKAGE_NAMES = {
    "windows": {"python": "Python.Python.3.12", "npm": "OpenJS.NodeJS", "node": "OpenJS.NodeJS",
                "git": "Git.Git", "cargo": "Rustlang.Rustup", "rust": "Rustlang.Rustup"},
    "macos": {"cargo": "rust", "rust": "rust", "npm": "node", "node": "node"},
    "linux": {"python": "python3", "cargo": "cargo", "rust": "cargo", "npm": "nodejs",
              "node": "nodejs", "mvn": "maven"},
}


@dataclass
class InstallHint:
    """What to tell the user about a missing tool."""

    tool: str
    os: str
    links: list[str] = field(default_factory=list)
    tips: list[str] = field(default_factory=list)
    # Candidate commands, tried in order by auto_install
    install_commands: list[list[str]] = field(default_factory=list)

    @property
    def can_auto_install(self) -> bool:
        return bool(self.install_commands)


def _links_and_tips(tool: str, os_name: str) -> tuple[list[str], list[str]]:
    if tool in ("cargo", "rust"):
        return ["https://rustup.rs/"], ["Run: curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh"]
    if tool == "python":
        if os_name == "windows":
            return ["https://www.python.org/downloads/windows/"], []
        if os_name == "macos":
            return ["https://www.python.org/downloads/macos/"], ["Or use Homebrew: brew install python"]
        return [], list(_LINUX_PYTHON)
    if tool in ("node", "npm"):
        tips = {
            "windows": ["Download the Windows installer"],
            "macos": ["Or use Homebrew: brew install node"],
            "linux": ["Or use nvm: https://github.com/nvm-sh/nvm"],
        }.get(os_name, [])
        return ["https://nodejs.org/"], tips
    if tool in ("java", "mvn"):
        return ["https://adoptium.net/ (Recommended)", "https://maven.apache.org/download.cgi (Maven)"], []
    if tool == "dotnet":
        return ["https://dotnet.microsoft.com/download"], []
    if tool == "git":
        tips = {
            "windows": ["Download Git for Windows"],
            "macos": ["Or use Homebrew: brew install git"],
            "linux": ["Use your package manager: sudo apt install git"],
        }.get(os_name, [])
        return ["https://git-scm.com/downloads"], tips
    return [], [f"Search for '{tool}' installation guide"]


def _install_commands(tool: str, os_name: str) -> list[list[str]]:
    package = _PACKAGE_NAMES.get(os_name, {}).get(tool, tool)
    commands: list[list[str]] = []
    if os_name == "windows":
        if resolve_program("winget"):
            commands.append(["winget", "install", "--id", package, "-e"])
        if resolve_program("choco"):
            commands.append(["choco", "install", package, "-y"])
    elif os_name == "macos":
        if resolve_program("brew"):
            commands.append(["brew", "install", package])
    elif os_name == "linux":
        if resolve_program("apt"):
            commands.append(["sudo", "apt", "install", "-y", package])
        if resolve_program("dnf"):
            commands.append(["sudo", "dnf", "install", "-y", package])
        if resolve_program("pacman"):
            commands.append(["sudo", "pacman", "-S", "--noconfirm", package])
    return commands


def install_hints(tool: str, os_name: str) -> InstallHint:
    links, tips = _links_and_tips(tool, os_name)
    return InstallHint(
        tool=tool,
        os=os_name,
        links=links,
        tips=tips,
        install_commands=_install_commands(tool, os_name),
    )


def auto_install(hint: InstallHint, runner: Callable[[list[str]], int]) -> bool:
    """Try each candidate command until one succeeds. Never raises on tool failure."""
    for argv in hint.install_commands:
        try:
            runner(argv)
        except DispatchError as e:
            log.warning("install attempt failed", argv=argv, error=str(e))
            continue
        log.info("installed", tool=hint.tool, argv=argv)
        return True
    return False
