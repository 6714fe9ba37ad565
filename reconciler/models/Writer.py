import csv
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from reconciler.errors import OutputWriteFailure
from reconciler.models.Config import Config
from reconciler.models.Reconciliation import ReconciliationReport
from reconciler.models.felt import format_felt

LISTING_FIELDNAMES = ["Player address", "Earned on appchain", "Claimed on mainnet"]
AIRDROP_FIELDNAMES = ["Player address", "Amount to airdrop"]


@dataclass
class Writer:
    config: Config

    @property
    def path(self) -> str:
        return self.config.output_dir

    @property
    def listing_path(self) -> str:
        return f"{self.path}/{self.config.listing_filename}"

    @property
    def airdrop_path(self) -> str:
        return f"{self.path}/{self.config.airdrop_filename}"

    @staticmethod
    def write_csv(f, rows: Iterable[list[Any]], fieldnames: list[str]) -> None:
        # header is fully quoted, rows are left bare
        csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n").writerow(fieldnames)
        csv.writer(f, lineterminator="\n").writerows(rows)

    @staticmethod
    def listing_rows(report: ReconciliationReport) -> list[list[Any]]:
        return [[format_felt(r.account), r.earned, r.claimed] for r in report.records]

    @staticmethod
    def airdrop_rows(report: ReconciliationReport) -> list[list[Any]]:
        return [[format_felt(r.account), r.outstanding] for r in report.airdrop]

    def _create_dir(self) -> None:
        Path(self.path).mkdir(parents=True, exist_ok=True)

    @staticmethod
    def file_mode() -> int:
        # what a plain open() would give under the current umask
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def _write_tmp(self, rows: list[list[Any]], fieldnames: list[str]) -> str:
        fd, tmp = tempfile.mkstemp(dir=self.path, suffix=".csv.tmp")
        try:
            with os.fdopen(fd, "w", newline="") as f:
                self.write_csv(f, rows, fieldnames)
            os.chmod(tmp, self.file_mode())
        except BaseException:
            os.remove(tmp)
            raise
        return tmp

    def _move_aside(self, dest: str) -> Optional[str]:
        """Park the report from a previous run so it can be restored on failure"""
        if not os.path.isfile(dest):
            return None
        fd, backup = tempfile.mkstemp(dir=self.path, suffix=".csv.bak")
        os.close(fd)
        os.replace(dest, backup)
        return backup

    def to_csv(self, report: ReconciliationReport) -> None:
        """
        Write the full listing and the airdrop list.
        Both files are staged next to their destination and only moved into
        place once both are complete. If either move fails, the reports from
        the previous run are put back, so the pair always comes from one run.
        """
        staged: list[str] = []
        backups: dict[str, Optional[str]] = {}
        replaced: list[str] = []
        try:
            self._create_dir()
            staged.append(self._write_tmp(self.listing_rows(report), LISTING_FIELDNAMES))
            staged.append(self._write_tmp(self.airdrop_rows(report), AIRDROP_FIELDNAMES))
            for tmp, dest in zip(staged, [self.listing_path, self.airdrop_path]):
                backups[dest] = self._move_aside(dest)
                os.replace(tmp, dest)
                replaced.append(dest)
        except OSError as e:
            for dest in replaced:
                os.remove(dest)
            for dest, backup in backups.items():
                if backup is not None:
                    os.replace(backup, dest)
            for tmp in staged:
                if os.path.exists(tmp):
                    os.remove(tmp)
            raise OutputWriteFailure(f"Could not write reports to {self.path}") from e

        for backup in backups.values():
            if backup is not None:
                os.remove(backup)
