#!/usr/bin/env python3
"""
Palaios — Ancient Greek παλαιός (old)

Deletes a given number of the oldest files in a directory whose names
match a regular expression. Matches are listed oldest first, narrowed by
the count policy, shown as a table and deleted after confirmation.

Usage:
    palaios -e '\\.log$'                  # Delete all matching files (asks first)
    palaios -e '\\.log$' -n 3             # Delete the 3 oldest matches
    palaios -e '\\.log$' -n -2            # Delete all but the 2 newest matches
    palaios -e '\\.log$' -P /var/backups  # Work in another directory
    palaios -e '\\.log$' --dry-run        # Only show what would be deleted
    palaios -e '\\.log$' -y               # Delete without confirmation
"""

import argparse
import sys
from enum import Enum
from typing import Optional

from rich.table import Table
from rich.text import Text

from auxiliary import format_bytes, format_path_for_display, format_timestamp
from console_ui import Choice, ConsoleUI, Prompter
from file_operations import FileOperations
from file_selection import (
    FileRecord,
    PalaiosError,
    PartialDeletionError,
    compile_pattern,
    filter_matches,
    list_by_time,
    program_name,
    select_by_count,
)
from palaios_config import PalaiosConfig

TRUNCATE_LEN = 30

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


class Outcome(Enum):
    DRY_RUN = "dry_run"
    CONFIRMED = "confirmed"
    ABORTED = "aborted"


def summary_line(records: list[FileRecord], truncate_len: int = TRUNCATE_LEN) -> str:
    """Count and total size of all *records*, noting when the table is cut short"""
    total_size = sum(r.size for r in records)
    hint = f"Total: {len(records)} file(s), {format_bytes(total_size)}"
    if len(records) > truncate_len:
        hint = f"Showing first {truncate_len} files only, {hint}"
    return hint


# ---------------------------------------------------------------------------
# Palaios
# ---------------------------------------------------------------------------


class Palaios:
    """Main application class for the Palaios old-file cleanup tool."""

    def __init__(
        self,
        config: PalaiosConfig,
        ui: Optional[ConsoleUI] = None,
        prompter: Optional[Prompter] = None,
        self_name: Optional[str] = None,
    ):
        self.config = config
        self.ui = ui or ConsoleUI()
        self.prompter = prompter or self.ui
        self.self_name = self_name if self_name is not None else program_name()

    # -- selection -----------------------------------------------------------

    def select(self) -> Optional[list[FileRecord]]:
        """List, filter and apply the count policy.

        Returns None when there is nothing to do.
        """
        regex = compile_pattern(self.config.pattern)
        records = list_by_time(self.config.path)
        matches = filter_matches(records, regex, self.self_name)

        if not matches:
            self.ui.print_info("No matching files found")
            return None

        selection = select_by_count(matches, self.config.number)
        if selection.all_kept:
            self.ui.print_info("All matching files will be kept due to given number flag")
            return None

        return selection.records

    # -- presentation --------------------------------------------------------

    def present(self, records: list[FileRecord]):
        """Show up to TRUNCATE_LEN records and a summary of all of them"""
        table = Table(box=None, show_edge=False, pad_edge=False, header_style="bold")
        # Headers stay left-aligned while cells are right-aligned
        table.add_column(Text("FileName", justify="left"), justify="right")
        table.add_column(Text("Size", justify="left"), justify="right", style="yellow")
        table.add_column(Text("ModTime", justify="left"), justify="right", style="dim")

        for record in records[:TRUNCATE_LEN]:
            table.add_row(Text(record.name), format_bytes(record.size), format_timestamp(record.mod_time))

        self.ui.console.print(table)
        self.ui.print_plain(summary_line(records))

    # -- confirmation --------------------------------------------------------

    def confirm(self, records: list[FileRecord]) -> tuple[Outcome, list[FileRecord]]:
        """Decide which of *records* get deleted"""
        if self.config.dry_run:
            return Outcome.DRY_RUN, []
        if self.config.yes:
            return Outcome.CONFIRMED, records

        try:
            choice = self.prompter.ask_yes_no_pick("All files above will be deleted, continue?")
        except EOFError:
            return Outcome.ABORTED, []

        if choice is Choice.YES:
            return Outcome.CONFIRMED, records
        if choice is Choice.PICK:
            return self._pick(records)
        return Outcome.ABORTED, []

    def _pick(self, records: list[FileRecord]) -> tuple[Outcome, list[FileRecord]]:
        by_name = {r.name: r for r in records}
        try:
            answers = self.prompter.ask_multi_select([r.name for r in records], title="Select files to delete")
        except EOFError:
            return Outcome.ABORTED, []

        picked: list[FileRecord] = []
        for name in answers:
            record = by_name.get(name)
            if record is not None and record not in picked:
                picked.append(record)

        if not picked:
            return Outcome.ABORTED, []
        return Outcome.CONFIRMED, picked

    # -- deletion ------------------------------------------------------------

    def delete(self, records: list[FileRecord]):
        """Delete every record; raise PartialDeletionError if any failed"""
        progress = self.ui.create_progress()
        with progress:
            task = progress.add_task("Deleting...", total=len(records))
            file_ops = FileOperations(
                progress_callback=lambda message: progress.update(task, description=message),
                result_callback=lambda _result: progress.advance(task),
            )
            operations = file_ops.plan_batch_operations(self.config.path, records)
            successful, failed = file_ops.execute_batch_operations(operations)

        failures = [(format_path_for_display(str(r.operation.target_path)), r.error_message) for r in failed]
        if failures:
            self.ui.show_operation_summary([r.operation.identifier for r in successful], failures)
            raise PartialDeletionError("Failed to delete some files")

        self.ui.print_success("Finished deleting above files")
        self.ui.print_info(f"Freed {format_bytes(sum(r.operation.size for r in successful))}")

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        try:
            records = self.select()
            if records is None:
                return EXIT_OK

            self.present(records)

            outcome, records = self.confirm(records)
            if outcome is Outcome.DRY_RUN:
                return EXIT_OK
            if outcome is Outcome.ABORTED:
                self.ui.print_warning("Aborted")
                return EXIT_OK

            self.delete(records)
        except PalaiosError as e:
            self.ui.print_error(str(e))
            return EXIT_ERROR
        except KeyboardInterrupt:
            self.ui.print_warning("\nInterrupted")
            return EXIT_INTERRUPTED

        return EXIT_OK


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palaios",
        description="Palaios — delete given number of oldest files matching given pattern",
    )
    parser.add_argument(
        "-e", "-p", "--pattern", required=True, help="regular expression used to match files"
    )
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=0,
        help="number of files to delete if positive, or to keep if negative; "
        "ALL matching files will be deleted if set to 0",
    )
    parser.add_argument("-P", "--path", "--prefix", dest="path", default=".", help="path to working directory")
    parser.add_argument(
        "--dry-run", "--no", dest="dry_run", action="store_true", help="print files to be deleted without deleting"
    )
    parser.add_argument("-y", "--yes", action="store_true", help="delete files without confirmation")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Palaios(PalaiosConfig.from_args(args))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
