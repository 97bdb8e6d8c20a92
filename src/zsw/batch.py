"""Directory-level operations: file selection, batch runs and backups."""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import numpy as np

from zsw.config import DEFAULT_EXTENSION, WeatherConfig
from zsw.engine import modify_file
from zsw.errors import BackupError, ZswError, error_chain, format_chain

BACKUP_SUFFIX = "_zsw"


@dataclass
class BatchReport:
    modified: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, list]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def iter_train_files(directory: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Files directly inside ``directory`` with the given suffix, by name."""
    suffix = "." + extension.lstrip(".")
    for path in sorted(directory.iterdir()):
        if path.is_file() and path.suffix == suffix:
            yield path


def modify_directory(
    directory: Path,
    config: WeatherConfig,
    rng: Optional[np.random.Generator] = None,
) -> BatchReport:
    """
    Run the mutation pipeline on every eligible file.

    A failing file is logged and skipped; the shared generator keeps
    advancing across files and is never reseeded.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    report = BatchReport()
    for path in iter_train_files(directory, config.extension):
        try:
            modify_file(path, config, rng)
        except (ZswError, OSError) as exc:
            logging.error("failed file modification, path: %s, reason: %s", path, format_chain(exc))
            report.failures.append((path, error_chain(exc)))
        else:
            report.modified.append(path)
    return report


def backup_path(directory: Path) -> Path:
    return directory.with_name(directory.name + BACKUP_SUFFIX)


def create_backup(directory: Path) -> Path:
    target = backup_path(directory)
    if target.exists():
        logging.warning("backup %s already exists, keeping it", target)
        return target
    shutil.copytree(directory, target)
    logging.info("backed up %s to %s", directory, target)
    return target


def restore_backup(directory: Path) -> None:
    """Replace ``directory`` with its backup; the backup is consumed."""
    source = backup_path(directory)
    if not source.is_dir():
        raise BackupError(f"no backup found at {source}")
    if directory.exists():
        shutil.rmtree(directory)
    shutil.move(str(source), str(directory))
    logging.info("restored %s from %s", directory, source)
