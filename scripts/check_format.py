#!/usr/bin/env python3
"""Ruff formatting and lint checks for mdlinks."""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

DEFAULT_TARGETS = ["mdlinks", "tests", "scripts"]


def run_step(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]{description}...[/bold blue]")

    tool_path = Path(sys.executable).parent / command[0]
    if tool_path.exists():
        command = [str(tool_path), *command[1:]]

    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Could not run {command[0]}: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Run ruff formatting and linting")
    parser.add_argument("--fix", action="store_true", help="Rewrite files instead of only checking")
    parser.add_argument("files", nargs="*", help=f"Paths to check (default: {' '.join(DEFAULT_TARGETS)})")
    args = parser.parse_args()

    targets = args.files or DEFAULT_TARGETS
    format_cmd = ["ruff", "format", *targets] if args.fix else ["ruff", "format", "--check", *targets]
    lint_cmd = ["ruff", "check", "--fix", *targets] if args.fix else ["ruff", "check", *targets]

    ok = run_step(format_cmd, "Ruff formatting")
    ok = run_step(lint_cmd, "Ruff linting") and ok
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
