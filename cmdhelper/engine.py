"""Language-action dispatcher — validates (ecosystem, verb) and runs the mapped tool."""

import subprocess
from typing import Callable

import structlog
import typer

from .actions.base import ParameterSource
from .actions.table import build_action_table
from .errors import ProcessExitFailure, ProcessLaunchFailure
from .models import ActionRequest, DispatchResult, DispatchStatus
from .scanner.host import resolve_program

log = structlog.get_logger(__name__)

Runner = Callable[[list[str]], int]


def prompt_parameter(prompt: str) -> str:
    """Ask on stderr and read one line from stdin; an empty line is a valid answer."""
    return typer.prompt(prompt.rstrip(), default="", show_default=False, prompt_suffix=" ", err=True).strip()


def run_command(argv: list[str]) -> int:
    """
    Run argv synchronously with inherited stdio; return 0 on success.

    Raises ProcessLaunchFailure when the program cannot be started and
    ProcessExitFailure when it exits non-zero. There is no timeout.
    """
    program = resolve_program(argv[0]) or argv[0]
    log.debug("spawning", argv=argv, program=program)
    try:
        completed = subprocess.run([program, *argv[1:]])
    except OSError as e:
        log.warning("launch failed", argv=argv, error=str(e))
        raise ProcessLaunchFailure(argv, e) from e
    if completed.returncode != 0:
        log.warning("command failed", argv=argv, returncode=completed.returncode)
        raise ProcessExitFailure(argv, completed.returncode)
    return completed.returncode


def dispatch(
    ecosystem: str,
    verb: str,
    params: ParameterSource = prompt_parameter,
    runner: Runner = run_command,
) -> DispatchResult:
    """
    Run the command mapped to (ecosystem, verb).

    Unsupported pairs come back as a DispatchResult and nothing is spawned.
    Supported pairs spawn exactly one process via runner; its failures
    propagate as DispatchError subclasses.
    """
    request = ActionRequest(ecosystem=ecosystem, verb=verb)
    table = build_action_table()

    actions = table.get(ecosystem)
    if actions is None:
        log.warning("unsupported ecosystem", ecosystem=ecosystem)
        return DispatchResult(
            request=request,
            status=DispatchStatus.UNSUPPORTED_ECOSYSTEM,
            message=f"Unsupported language: {ecosystem}. Supported: {', '.join(table)}",
        )

    supported = list(actions)
    template = actions.get(verb)
    if template is None:
        log.warning("unsupported action", ecosystem=ecosystem, verb=verb)
        return DispatchResult(
            request=request,
            status=DispatchStatus.UNSUPPORTED_VERB,
            message=(
                f"Invalid action {verb} for language {ecosystem}. "
                f"Supported actions: {', '.join(supported)}"
            ),
            supported_verbs=supported,
        )

    argv = template.build(params)
    log.info("dispatching", ecosystem=ecosystem, verb=verb, argv=argv)
    code = runner(argv)
    return DispatchResult(
        request=request,
        status=DispatchStatus.EXECUTED,
        message=f"Executed: {' '.join(argv)}",
        argv=argv,
        supported_verbs=supported,
        exit_code=code,
    )
