#!/usr/bin/env python3
import os
from pathlib import Path
from typing import Optional

import click
import pyperclip
from rich.console import Console
from rich.markup import escape

from .composer import CommitComposer
from .config import DEFAULT_CONFIG_FILENAME, Config
from .core import GitCommitter
from .exceptions import RepositoryError
from .observers import ConsoleLogObserver, FileLogObserver
from .prompter import ClickPrompter, PromptTheme
from .prompts import NOTHING_STAGED_MESSAGE
from .repository import GitRepository

console = Console()


def show_config(repo_path: Path) -> None:
    config = Config.load(repo_path)
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(
            f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]"
        )
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<20} {'Source':<10}")
    console.print("-" * 50)
    for name, value in config.model_dump().items():
        shown = repr(value) if isinstance(value, str) else str(value)
        console.print(f"{name:<20} {escape(shown):<20} {source:<10}")

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


def show_config_dir(repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    config_path_str = str(config_path)

    if not config_path.exists():
        Config().save(repo_path)
        console.print("[yellow]Created new config file with default values[/yellow]")

    pyperclip.copy(config_path_str)
    console.print(f"[green]Config file location:[/green] {config_path_str}")
    console.print("[green]Path copied to clipboard![/green]")


def resolve_repo_path(path: Path) -> Path:
    """Root of the repository containing ``path``, or ``path`` itself outside one."""
    try:
        return GitRepository.open(path.absolute()).working_dir
    except RepositoryError:
        return path.absolute()


def resolve_log_file(
    log_file: Optional[Path], config: Config, repository: GitRepository
) -> Optional[Path]:
    """The command line log file wins; config log files live in the repository."""
    if log_file is not None:
        return log_file
    config_log_file = config.get_log_file()
    if config_log_file is None:
        return None
    return repository.working_dir / config_log_file


@click.command()
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path inside the git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-d", "--dry-run", is_flag=True, help="Compose and show the message without committing"
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log git operations (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
@click.option("--check-updates", is_flag=True, help="Check for available updates")
def main(
    config_dir: bool,
    config_list: bool,
    path: Path,
    dry_run: bool,
    log_file: Optional[Path],
    version: bool,
    check_updates: bool,
):
    """
    Interactively write a conventional commit message and commit the staged changes.

    You will be asked for:
    1. The type of change (feat, fix, docs, ...)
    2. The scope and a short and long description
    3. Whether the change is breaking (described in your editor)
    4. The issues the change closes, fixes or resolves

    Configuration can be set in .gitconvcommit.toml in the repository root.
    Command line options override configuration file settings.
    """
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        if check_updates:
            from .version import check_updates_and_display

            check_updates_and_display()
            return

        repo_path = resolve_repo_path(path)

        if config_list:
            show_config(repo_path)
            return

        if config_dir:
            show_config_dir(repo_path)
            return

        repository = GitRepository.open(repo_path)
        config = Config.load(repository.working_dir)

        if not repository.has_staged_changes():
            console.print(f"[yellow]{NOTHING_STAGED_MESSAGE}[/yellow]")
            return

        prompter = ClickPrompter(
            PromptTheme.from_config(config), console, editor=config.editor
        )
        composer = CommitComposer(prompter, config)
        message = composer.format_message(composer.compose())

        console.print()
        console.print(message, markup=False, highlight=False)

        if dry_run:
            console.print("[yellow]Dry run: no commit created[/yellow]")
            return

        committer = GitCommitter(repository, console)
        committer.add_observer(ConsoleLogObserver(console))

        log_file_path = resolve_log_file(log_file, config, repository)
        if log_file_path:
            committer.add_observer(FileLogObserver(str(log_file_path)))

        committer.commit(message)
    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
