"""CLI entry point — project actions, search and everyday conveniences."""

import os
import sys
from pathlib import Path
from typing import Optional

import click
import typer

from . import __version__
from .actions import ecosystem_for_project, normalize_ecosystem, normalize_verb
from .actions.table import build_action_table
from .config import config_path, load_config, load_config_file
from .engine import dispatch, run_command
from .errors import ConfigError, DispatchError, FormatError, NetworkError, UnknownProjectType
from .format import (
    error,
    failure,
    format_config,
    format_install_hint,
    format_matches,
    format_pairs,
    heading,
    styled_path,
    success,
)
from .installer import auto_install, install_hints
from .log import LOG_FILE, configure_logging
from .scanner import current_os, identify_project_type, is_tool_installed, search_content
from .tools import env as env_tools
from .tools import files, formats, hashing, network, text as text_tools

app = typer.Typer(help="Everyday developer conveniences behind one command.", no_args_is_help=True)
env_app = typer.Typer(help="Environment variables.", no_args_is_help=True)
hash_app = typer.Typer(help="MD5 / SHA-256 / SHA-512 digests.", no_args_is_help=True)
text_app = typer.Typer(help="Text encoding and case conversion.", no_args_is_help=True)
fmt_app = typer.Typer(help="JSON and YAML formatting.", no_args_is_help=True)
config_app = typer.Typer(help="Configuration file.", no_args_is_help=True)
net_app = typer.Typer(help="Port checks, DNS lookups and ping.", no_args_is_help=True)
app.add_typer(env_app, name="env")
app.add_typer(hash_app, name="hash")
app.add_typer(text_app, name="text")
app.add_typer(fmt_app, name="fmt")
app.add_typer(config_app, name="config")
app.add_typer(net_app, name="net")


def _err(msg: str) -> None:
    """Usage error: click renders it in its error box and exits 2."""
    raise click.BadParameter(msg)


def _color() -> Optional[bool]:
    ctx = click.get_current_context(silent=True)
    state = ctx.find_object(dict) if ctx else None
    if state and not state.get("color", True):
        return False
    return None


def _out(text: str = "", err: bool = False) -> None:
    typer.echo(text, err=err, color=_color())


def _fail(msg: str, code: int = 1) -> None:
    """Report msg on stderr and exit with code."""
    _out(error(msg), err=True)
    raise typer.Exit(code)


def _default_output() -> Path:
    ctx = click.get_current_context(silent=True)
    state = ctx.find_object(dict) if ctx else None
    return Path((state or {}).get("default_output", "."))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cmdhelper {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Detailed logs on stderr"),
    logs_out: bool = typer.Option(False, "--logs-out", "-O", help=f"Also write trace logs to {LOG_FILE}"),
    goto: Optional[Path] = typer.Option(None, "--goto", "-g", help="Change to this directory (or a file's parent) first"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
) -> None:
    """Everyday developer conveniences behind one command."""
    try:
        cfg = load_config()
    except ConfigError as e:
        _err(str(e))

    configure_logging(
        verbose=verbose or cfg.general.verbose,
        log_file=LOG_FILE if (logs_out or cfg.general.log_to_file) else None,
    )
    ctx.obj = {
        "color": cfg.colors.enabled and not no_color,
        "default_output": cfg.paths.default_output,
        "config": cfg,
    }

    if goto is not None:
        target = goto if goto.is_dir() else goto.parent
        try:
            os.chdir(target)
        except OSError as e:
            _err(f"Error navigating to {target}: {e}")
        _out(f"Navigated to: {Path.cwd()}")


def _interactive() -> bool:
    return sys.stdin.isatty()


def _confirm_install(tool: str) -> bool:
    """Ask only on a terminal; piped stdin belongs to the action's own prompt."""
    if not _interactive():
        _out(f"ℹ Not an interactive terminal; skipping auto-install of {tool}", err=True)
        return False
    try:
        return typer.confirm(f"Would you like to automatically install {tool}?", default=True, err=True)
    except click.Abort:
        return False


def _check_toolchain(ecosystem: str, assume_yes: bool) -> None:
    """Print install hints (and maybe auto-install) when the tool is missing."""
    if is_tool_installed(ecosystem):
        return
    hint = install_hints(ecosystem, current_os())
    _out(format_install_hint(hint))
    if not hint.can_auto_install:
        return
    if assume_yes or _confirm_install(ecosystem):
        _out(f"\n{heading('→')} Installing {ecosystem}...")
        if auto_install(hint, run_command):
            _out(success(f"{ecosystem} installed successfully!"))
            _out("ℹ You may need to restart your terminal for changes to take effect")
        else:
            _out(failure("Installation failed. Please try manual installation"), err=True)


@app.command("run")
def run_cmd(
    action: str = typer.Argument(..., help="Action: run, build, test, clean, install, ..."),
    language: Optional[str] = typer.Option(None, "--language", "-L", help="cargo/rust, npm/js, python, java, dotnet"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Auto-install a missing toolchain without asking"),
    no_install_hints: bool = typer.Option(False, "--no-install-hints", help="Skip the toolchain check"),
) -> None:
    """Run a project action; the language is detected from the current directory if omitted."""
    if language is None:
        try:
            project_type = identify_project_type(Path.cwd())
        except UnknownProjectType as e:
            _out(error(f"Error identifying project type: {e}"), err=True)
            return
        _out(f"Identified project type: {project_type.value}")
        ecosystem = ecosystem_for_project(project_type)
    else:
        ecosystem = normalize_ecosystem(language)
    verb = normalize_verb(action)

    if not no_install_hints and verb in build_action_table().get(ecosystem, {}):
        _check_toolchain(ecosystem, yes)

    try:
        result = dispatch(ecosystem, verb)
    except DispatchError as e:
        _fail(str(e), e.exit_code)
    if not result.executed:
        _out(error(result.message), err=True)


@app.command("identify")
def identify_cmd(
    path: Path = typer.Argument(Path("."), exists=True, file_okay=False, dir_okay=True, help="Directory to classify"),
) -> None:
    """Print the project type of a directory."""
    try:
        project_type = identify_project_type(path)
    except UnknownProjectType as e:
        _fail(str(e))
    _out(project_type.value)


@app.command("actions")
def actions_cmd(
    language: Optional[str] = typer.Argument(None, help="Only this ecosystem"),
) -> None:
    """List supported actions per ecosystem."""
    table = build_action_table()
    keys = [normalize_ecosystem(language)] if language else list(table)
    for key in keys:
        actions = table.get(key)
        if actions is None:
            _fail(f"Unsupported language: {key}")
        _out(heading(f"{key}:"))
        for verb, template in actions.items():
            cmdline = " ".join([template.program, *template.args] + (["<input>"] if template.prompt else []))
            _out(f"  {verb:<8} {cmdline}")


@app.command("grep")
def grep_cmd(
    needle: str = typer.Argument(..., help="Literal text to look for"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Root directory (default: config paths.default_output)"),
    root_level: int = typer.Option(3, "--root-level", min=0, help="How many directory levels to descend"),
    limit: int = typer.Option(0, "--limit", "-l", min=0, help="Max lines shown per file (0 = all)"),
) -> None:
    """Search file contents recursively."""
    root = path or _default_output()
    if not root.is_dir():
        _err(f"Directory not found: {root}")
    results = search_content(needle, root, depth=root_level, limit=limit)
    if not results:
        _out(click.style(f"No results found for your input '{needle}'", fg="yellow", bold=True), err=True)
        return
    for line in format_matches(results, needle):
        _out(line)


@app.command("find")
def find_cmd(
    pattern: str = typer.Argument(..., help="Glob pattern, e.g. '*.toml'"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Root directory"),
    limit: int = typer.Option(0, "--limit", "-l", min=0, help="Max depth and max results (0 = unbounded)"),
) -> None:
    """Find files by name pattern."""
    root = path or _default_output()
    if not root.is_dir():
        _err(f"Directory not found: {root}")
    for p in files.find_files(pattern, root, limit=limit):
        _out(styled_path(p))


def _transfer(op, verb: str, done: str, src: Path, output: Optional[Path], name: Optional[str]) -> None:
    dest_dir = output or _default_output()
    try:
        dest = op(src, dest_dir, name)
    except OSError as e:
        _fail(f"Error {verb} file: {src} to {dest_dir}: {e}")
    _out(f"File {done} from {src} to {dest}")


@app.command("copy")
def copy_cmd(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to copy"),
    output: Optional[Path] = typer.Option(None, "--output-path", "-o", help="Destination directory"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New file name"),
) -> None:
    """Copy a file into a directory."""
    _transfer(files.copy_file, "copying", "copied", src, output, name)


@app.command("move")
def move_cmd(
    src: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to move"),
    output: Optional[Path] = typer.Option(None, "--output-path", "-o", help="Destination directory"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New file name"),
) -> None:
    """Move a file into a directory."""
    _transfer(files.move_file, "moving", "moved", src, output, name)


@env_app.command("list")
def env_list_cmd() -> None:
    """List all environment variables."""
    _out(heading("Environment Variables:"))
    _out(click.style("=" * 80, fg="cyan"))
    for line in format_pairs(env_tools.list_env()):
        _out(line)


@env_app.command("get")
def env_get_cmd(key: str = typer.Argument(...)) -> None:
    """Print one environment variable."""
    try:
        value = env_tools.get_env(key)
    except KeyError:
        _fail(f"Environment variable '{key}' not found")
    _out(format_pairs([(key, value)])[0])


@env_app.command("set")
def env_set_cmd(assignment: str = typer.Argument(..., help="KEY=VALUE")) -> None:
    """Set a variable for this session only."""
    try:
        key, value = env_tools.parse_env_assignment(assignment)
    except ValueError:
        _err("env set requires KEY=VALUE format")
    env_tools.set_env(key, value)
    _out(success(f"Set {format_pairs([(key, value)])[0]}"))
    _out(click.style("Note: ", fg="yellow", bold=True) + "This change is only for the current session")


@env_app.command("load")
def env_load_cmd(path: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Load KEY=VALUE lines from a .env file."""
    try:
        pairs = env_tools.load_env_file(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Error loading env file: {e}")
    for line in format_pairs(pairs):
        _out(success(f"Loaded: {line}"))
    _out(f"\n{click.style('Success:', fg='green', bold=True)} Loaded {len(pairs)} environment variables from {path}")


@env_app.command("export")
def env_export_cmd(
    path: Path = typer.Argument(...),
    name_filter: Optional[str] = typer.Option(None, "--filter", help="Only keys containing this text"),
) -> None:
    """Export environment variables to a file."""
    try:
        count = env_tools.export_env(path, name_filter)
    except OSError as e:
        _fail(f"Error exporting env vars: {e}")
    _out(f"{click.style('Success:', fg='green', bold=True)} Exported {count} environment variables to {path}")


def _algorithm(name: str) -> hashing.HashAlgorithm:
    return hashing.HashAlgorithm.parse(name) or hashing.HashAlgorithm.SHA256


@hash_app.command("string")
def hash_string_cmd(
    value: str = typer.Argument(...),
    algo: str = typer.Option("sha256", "--algo", "-a", help="md5, sha256, sha512"),
) -> None:
    """Hash a string."""
    _out(f"Hash: {hashing.hash_string(value, _algorithm(algo))}")


@hash_app.command("file")
def hash_file_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
    algo: str = typer.Option("sha256", "--algo", "-a", help="md5, sha256, sha512"),
    verify: Optional[str] = typer.Option(None, "--verify", help="Expected digest"),
) -> None:
    """Hash a file, or verify it against an expected digest."""
    algorithm = _algorithm(algo)
    action = "Verifying" if verify else "Calculating"
    _out(f"{heading('→')} {action} {algorithm.label} hash for: {styled_path(path)}")
    try:
        if verify is None:
            _out(f"{heading('Hash:')} {hashing.hash_file(path, algorithm)}")
            return
        ok, calculated = hashing.verify_file(path, verify, algorithm)
    except OSError as e:
        _fail(f"Failed to calculate hash: {e}")
    if ok:
        _out(success("Hash verification successful!"))
    else:
        _out(failure("Hash verification failed!"))
    _out(f"  Expected:   {verify.strip().lower()}")
    _out(f"  Calculated: {calculated.lower()}")
    if not ok:
        raise typer.Exit(1)


@hash_app.command("all")
def hash_all_cmd(path: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """MD5, SHA-256 and SHA-512 of a file."""
    _out(f"{heading('→')} Calculating all hashes for: {styled_path(path)}\n")
    try:
        digests = hashing.hash_file_all(path)
    except OSError as e:
        _fail(f"Failed to calculate hash: {e}")
    for algorithm, digest in digests.items():
        label = f"{algorithm.label}:"
        _out(f"{heading(f'{label:<8}')} {digest}")


@text_app.command("base64-encode")
def base64_encode_cmd(value: str = typer.Argument(...)) -> None:
    _out(f"{heading('Encoded:')} {text_tools.base64_encode(value)}")


@text_app.command("base64-decode")
def base64_decode_cmd(value: str = typer.Argument(...)) -> None:
    try:
        decoded = text_tools.base64_decode(value)
    except ValueError as e:
        _fail(str(e))
    _out(f"{heading('Decoded:')} {decoded}")


@text_app.command("url-encode")
def url_encode_cmd(value: str = typer.Argument(...)) -> None:
    _out(f"{heading('Encoded:')} {text_tools.url_encode(value)}")


@text_app.command("url-decode")
def url_decode_cmd(value: str = typer.Argument(...)) -> None:
    _out(f"{heading('Decoded:')} {text_tools.url_decode(value)}")


@text_app.command("case")
def case_cmd(
    case_type: str = typer.Argument(..., help="upper, lower, title, camel, snake, kebab"),
    value: str = typer.Argument(...),
) -> None:
    """Convert text to another case."""
    try:
        converted = text_tools.convert_case(value, case_type)
    except ValueError as e:
        _err(str(e))
    _out(f"{heading(case_type.lower() + ':')} {converted}")


@text_app.command("stats")
def stats_cmd(value: str = typer.Argument(...)) -> None:
    """Count lines, words, characters and bytes."""
    _out(heading("Text Statistics:"))
    for label, count in text_tools.text_stats(value).items():
        _out(f"  {label.title() + ':':<12}{click.style(str(count), fg='green')}")


@text_app.command("replace")
def replace_cmd(
    value: str = typer.Argument(...),
    find: str = typer.Argument(...),
    replace: str = typer.Argument(...),
) -> None:
    """Replace every occurrence of FIND with REPLACE."""
    result, count = text_tools.find_replace(value, find, replace)
    _out(success(f"Replaced {click.style(str(count), fg='yellow')} occurrences"))
    _out(heading("Result:"))
    _out(result)


def _read_input(value: str) -> str:
    """'-' reads the document from stdin."""
    if value == "-":
        return click.get_text_stream("stdin").read()
    return value


def _run_format(fn, value: str, title: str) -> None:
    try:
        rendered = fn(_read_input(value))
    except FormatError as e:
        _fail(str(e))
    _out(heading(title))
    _out(rendered.rstrip("\n"))


@fmt_app.command("json")
def json_format_cmd(value: str = typer.Argument(..., help="JSON text or '-' for stdin")) -> None:
    """Pretty-print JSON."""
    _run_format(formats.format_json, value, "Formatted JSON:")


@fmt_app.command("minify")
def json_minify_cmd(value: str = typer.Argument(..., help="JSON text or '-' for stdin")) -> None:
    """Minify JSON."""
    _run_format(formats.minify_json, value, "Minified JSON:")


@fmt_app.command("yaml")
def yaml_format_cmd(value: str = typer.Argument(..., help="YAML text or '-' for stdin")) -> None:
    """Normalize YAML."""
    _run_format(formats.format_yaml, value, "Formatted YAML:")


@fmt_app.command("json-to-yaml")
def json_to_yaml_cmd(value: str = typer.Argument(..., help="JSON text or '-' for stdin")) -> None:
    _run_format(formats.json_to_yaml, value, "Converted to YAML:")


@fmt_app.command("yaml-to-json")
def yaml_to_json_cmd(value: str = typer.Argument(..., help="YAML text or '-' for stdin")) -> None:
    _run_format(formats.yaml_to_json, value, "Converted to JSON:")


def _run_validate(fn, value: str, kind: str) -> None:
    try:
        fn(_read_input(value))
    except FormatError as e:
        _out(failure(f"Invalid {kind}"), err=True)
        _fail(str(e))
    _out(success(f"{kind} is valid"))


@fmt_app.command("validate-json")
def validate_json_cmd(value: str = typer.Argument(..., help="JSON text or '-' for stdin")) -> None:
    _run_validate(formats.validate_json, value, "JSON")


@fmt_app.command("validate-yaml")
def validate_yaml_cmd(value: str = typer.Argument(..., help="YAML text or '-' for stdin")) -> None:
    _run_validate(formats.validate_yaml, value, "YAML")


@fmt_app.command("query")
def json_query_cmd(
    value: str = typer.Argument(..., help="JSON text or '-' for stdin"),
    query_path: str = typer.Argument(..., help="Dotted path, e.g. server.ports.0"),
) -> None:
    """Print the value at a dotted path."""
    _run_format(lambda doc: formats.json_query(doc, query_path), value, "Query Result:")


@net_app.command("port")
def net_port_cmd(
    port: int = typer.Argument(..., min=1, max=65535),
    host: str = typer.Option("localhost", "--host", help="Host to connect to"),
    timeout: float = typer.Option(network.PORT_TIMEOUT, "--timeout", min=0.1, help="Seconds to wait"),
) -> None:
    """Check whether a TCP port accepts connections. Exits 1 when closed."""
    _out(f"{click.style('→', fg='cyan')} Checking {host}:{port}")
    try:
        is_open = network.check_port(host, port, timeout)
    except NetworkError as e:
        _fail(str(e))
    if not is_open:
        _out(failure(f"Port {port} is CLOSED"))
        raise typer.Exit(1)
    _out(success(f"Port {port} is OPEN"))


@net_app.command("dns")
def net_dns_cmd(hostname: str = typer.Argument(...)) -> None:
    """Resolve a host name to its IP addresses."""
    _out(f"{click.style('→', fg='cyan')} Looking up {hostname}")
    try:
        addresses = network.dns_lookup(hostname)
    except NetworkError as e:
        _fail(f"DNS lookup failed: {e}")
    _out()
    _out(heading("IP Addresses:"))
    for ip in addresses:
        _out(f"  {click.style(ip, fg='green')}")


@net_app.command("ping")
def net_ping_cmd(
    host: str = typer.Argument(...),
    count: int = typer.Option(4, "--count", "-c", min=1, help="Echo requests to send"),
) -> None:
    """Run the system ping tool; its exit code is passed through."""
    try:
        run_command(network.ping_command(host, current_os(), count))
    except DispatchError as e:
        _fail(str(e), e.exit_code)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show the active configuration."""
    _out(format_config(ctx.find_object(dict)["config"], config_path()))


@config_app.command("load")
def config_load_cmd(path: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Parse and display a configuration file."""
    try:
        cfg = load_config_file(path)
    except ConfigError as e:
        _fail(str(e))
    _out(f"Configuration loaded from: {path}")
    _out(format_config(cfg, path))


@config_app.command("path")
def config_path_cmd() -> None:
    """Print where the configuration file is read from."""
    _out(str(config_path()))


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
