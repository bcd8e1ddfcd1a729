"""Exception types raised by cmdhelper modules."""


class CmdHelperError(Exception):
    """Base class for errors the CLI reports to the user."""


class UnknownProjectType(CmdHelperError):
    """No ecosystem marker was recognized in the directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Unknown project type: {path}")


class DispatchError(CmdHelperError):
    """The dispatched tool could not run to success. Ends the run with exit_code."""

    exit_code = 1

    def __init__(self, message: str, argv: list[str], exit_code: int = 1):
        self.argv = argv
        self.exit_code = exit_code
        super().__init__(message)


class ProcessLaunchFailure(DispatchError):
    """The external tool could not be started (missing binary, permissions)."""

    def __init__(self, argv: list[str], error: OSError):
        self.error = error
        super().__init__(f"Error executing command: {error}", argv, exit_code=1)


class ProcessExitFailure(DispatchError):
    """The external tool ran and exited non-zero."""

    def __init__(self, argv: list[str], returncode: int):
        self.returncode = returncode
        # Signals surface as negative return codes
        code = returncode if returncode > 0 else 1
        super().__init__(f"Error executing command: {' '.join(argv)}", argv, exit_code=code)


class FormatError(CmdHelperError):
    """Input could not be parsed as JSON/YAML, or a query path was missing."""


class ConfigError(CmdHelperError):
    """Configuration file exists but cannot be read or parsed."""


class NetworkError(CmdHelperError):
    """A host name could not be resolved."""
