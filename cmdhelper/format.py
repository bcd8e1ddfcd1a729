"""Terminal output formatting: colors and layout for CLI results."""

from pathlib import Path
from typing import List

import click

from .config import Config
from .installer import InstallHint
from .models import FileMatches

RULE_WIDTH = 80


def _rule(color: str) -> str:
    return click.style("=" * RULE_WIDTH, fg=color)


def heading(text: str) -> str:
    return click.style(text, fg="cyan", bold=True)


def success(text: str) -> str:
    return click.style("✓ ", fg="green", bold=True) + text


def failure(text: str) -> str:
    return click.style("✗ ", fg="red", bold=True) + text


def error(text: str) -> str:
    return click.style("Error: ", fg="red", bold=True) + text


def styled_path(path: Path) -> str:
    """Files green, directories blue, anything else plain."""
    text = str(path)
    if path.is_file():
        return click.style(text, fg="green")
    if path.is_dir():
        return click.style(text, fg="blue")
    return text


def format_matches(matches: List[FileMatches], needle: str) -> List[str]:
    """'path : line_no : text' with the needle highlighted."""
    lines = []
    highlighted = click.style(needle, fg="yellow")
    for fm in matches:
        path = click.style(str(fm.path), fg="cyan")
        for number, text in fm.lines:
            num = click.style(f"{number:<4}", fg="blue")
            lines.append(f"{path} : {num} : {text.strip().replace(needle, highlighted)}")
    return lines


def format_pairs(pairs, sep: str = " = ") -> List[str]:
    return [f"{click.style(k, fg='green')}{sep}{click.style(v, fg='yellow')}" for k, v in pairs]


def format_install_hint(hint: InstallHint) -> str:
    lines = [
        "",
        _rule("yellow"),
        click.style("⚠ ", fg="yellow", bold=True) + click.style(hint.tool, fg="cyan", bold=True) + " is not installed",
        _rule("yellow"),
    ]
    if hint.links or hint.tips:
        lines.append("")
        lines.append(heading("Download Links:"))
        for link in hint.links:
            lines.append(f"  {click.style('→', fg='cyan')} {link}")
        for tip in hint.tips:
            lines.append(f"  {click.style('💡', fg='yellow')} {tip}")
    if hint.can_auto_install:
        lines.append("")
        lines.append(click.style("Auto-Installation Available!", fg="green", bold=True))
    else:
        lines.append("")
        lines.append(f"{click.style('ℹ', fg='cyan')} Please install {hint.tool} manually using the links above")
    return "\n".join(lines)


def _on_off(flag: bool, yes: str = "enabled", no: str = "disabled") -> str:
    return click.style(yes, fg="green") if flag else click.style(no, fg="red")


def format_config(cfg: Config, path: Path) -> str:
    lines = [
        heading("Current Configuration"),
        _rule("cyan"),
        "",
        click.style("General:", fg="yellow", bold=True),
        f"  Verbose:      {_on_off(cfg.general.verbose)}",
        f"  Log to file:  {_on_off(cfg.general.log_to_file)}",
        "",
        click.style("Colors:", fg="yellow", bold=True),
        f"  Enabled:      {_on_off(cfg.colors.enabled, 'yes', 'no')}",
        f"  Theme:        {click.style(cfg.colors.theme, fg='green')}",
        "",
        click.style("Paths:", fg="yellow", bold=True),
        f"  Default output: {click.style(cfg.paths.default_output, fg='green')}",
        f"  Download path:  {click.style(cfg.paths.download_path, fg='green')}",
        "",
        f"{heading('Config file:')} {click.style(str(path), fg='yellow')}",
    ]
    return "\n".join(lines)
