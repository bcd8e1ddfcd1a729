"""Static ecosystem -> verb -> command table."""

from ..models import Ecosystem
from .base import CommandTemplate

ActionTable = dict[str, dict[str, CommandTemplate]]


def build_action_table() -> ActionTable:
    """Return a fresh table. Verb order is the order shown to users."""
    return {
        Ecosystem.JAVA.value: {
            "run": CommandTemplate("java", ("-jar",), prompt="Enter Java program JAR path: "),
            "build": CommandTemplate("javac", prompt="Enter Java program source file path: "),
            "test": CommandTemplate("junit", prompt="Enter Java test file path: "),
            "install": CommandTemplate("mvn", ("install",)),
            "clean": CommandTemplate("mvn", ("clean",)),
        },
        Ecosystem.PYTHON.value: {
            "run": CommandTemplate("python", prompt="Enter Python program file path: "),
            "test": CommandTemplate("pytest", prompt="Enter Python test file path: "),
            "install": CommandTemplate("pip", ("install",), prompt="Enter Python package name: "),
            "remove": CommandTemplate("pip", ("uninstall",), prompt="Enter Python package name to remove: "),
            "clean": CommandTemplate("rm", ("-rf", "__pycache__")),
        },
        Ecosystem.DOTNET.value: {
            "run": CommandTemplate("dotnet", ("run",)),
            "build": CommandTemplate("dotnet", ("build",)),
            "clean": CommandTemplate("dotnet", ("clean",)),
            "install": CommandTemplate("nuget", ("install",), prompt="Enter NuGet package name: "),
            "remove": CommandTemplate("nuget", ("uninstall",), prompt="Enter NuGet package name to remove: "),
        },
        Ecosystem.CARGO.value: {
            "run": CommandTemplate("cargo", ("run",)),
            "build": CommandTemplate("cargo", ("build",)),
            "clean": CommandTemplate("cargo", ("clean",)),
            "test": CommandTemplate("cargo", ("test",)),
            "doc": CommandTemplate("cargo", ("doc",)),
            "format": CommandTemplate("cargo", ("fmt",)),
            "check": CommandTemplate("cargo", ("check",)),
            "update": CommandTemplate("cargo", ("update",)),
        },
        Ecosystem.NPM.value: {
            "install": CommandTemplate("npm", ("install",)),
            "run": CommandTemplate("npm", ("start",)),
            "test": CommandTemplate("npm", ("test",)),
            "clean": CommandTemplate("rm", ("-rf", "node_modules")),
            "build": CommandTemplate("npm", ("run", "build")),
            "publish": CommandTemplate("npm", ("publish",)),
            "update": CommandTemplate("npm", ("update",)),
        },
    }
