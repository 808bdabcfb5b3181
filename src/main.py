"""Main entry point for the todo CLI.

Storage, manager and app are built once here and passed down explicitly.
Option defaults come from the TODO_* environment (see config.py); an
explicit option wins over the environment.
"""
from typing import Optional
from pathlib import Path

import click

from cli import App
from config import Settings, STORAGE_BACKENDS, LOG_LEVELS, build_storage
from logging_setup import setup_logging
from manager import TodoManager


@click.command()
@click.option('--storage', 'storage_backend',
              type=click.Choice(STORAGE_BACKENDS, case_sensitive=False),
              default=lambda: Settings.from_env().storage_backend,
              help='Where todos are kept between runs (env TODO_STORAGE, default file).')
@click.option('--data-file', type=click.Path(dir_okay=False, path_type=Path),
              default=lambda: Settings.from_env().data_file,
              help='Todos file to use instead of the per-user default (env TODO_DATA_FILE).')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=lambda: Settings.from_env().log_level,
              help='Level written to todocli.log (env TODO_LOG_LEVEL, default WARNING).')
def main(storage_backend: str, data_file: Optional[Path], log_level: str) -> None:
    """Interactive todo list: add, list, toggle, delete, exit."""
    settings = Settings(
        storage_backend=storage_backend.lower(),
        data_file=data_file,
        log_dir=Settings.from_env().log_dir,
        log_level=log_level.upper(),
    )
    setup_logging(log_dir=settings.resolved_log_dir(), file_level=settings.log_level_value)
    manager = TodoManager(build_storage(settings))
    App(manager).run()


if __name__ == "__main__":
    main()
