"""Host inspector — OS name and toolchain presence."""

import platform
import shutil
import subprocess

import structlog

log = structlog.get_logger(__name__)


def current_os() -> str:
    """Normalized OS name: "macos", "linux" or "windows"."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    if system == "windows":
        return "windows"
    return "linux"


def resolve_program(program: str) -> str | None:
    """Full path of program on PATH (honours PATHEXT, so npm -> npm.cmd on Windows)."""
    return shutil.which(program)


def is_tool_installed(tool: str) -> bool:
    """True if `tool --version` runs and exits 0."""
    exe = resolve_program(tool)
    if not exe:
        log.info("tool not on PATH", tool=tool)
        return False
    try:
        result = subprocess.run(
            [exe, "--version"],
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        log.warning("tool version check failed", tool=tool, error=str(e))
        return False
    installed = result.returncode == 0
    log.info("tool version check", tool=tool, installed=installed)
    return installed
