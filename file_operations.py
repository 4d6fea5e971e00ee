#!/usr/bin/env python3
"""
File Deletion Operations

Plans and executes file deletions in batches. A failure on one file is
recorded in its result and never stops the rest of the batch.
"""

import pathlib
from dataclasses import dataclass
from typing import Callable, Optional

from file_selection import FileRecord


@dataclass
class DeleteOperation:
    """Represents a planned file deletion"""

    target_path: pathlib.Path
    size: int = 0
    identifier: str = ""  # Optional identifier for tracking

    def __post_init__(self):
        if not self.identifier:
            self.identifier = self.target_path.name


@dataclass
class OperationResult:
    """Result of a file deletion"""

    operation: DeleteOperation
    success: bool
    error_message: Optional[str] = None


class FileOperations:
    """Batch file deletion handler"""

    def __init__(
        self,
        progress_callback: Optional[Callable[[str], None]] = None,
        result_callback: Optional[Callable[[OperationResult], None]] = None,
    ):
        """Initialize with optional callbacks run before and after each deletion"""
        self.progress_callback = progress_callback
        self.result_callback = result_callback

    def execute_operation(self, operation: DeleteOperation) -> OperationResult:
        """Delete a single file"""
        try:
            operation.target_path.unlink()
            return OperationResult(operation=operation, success=True)
        except OSError as e:
            return OperationResult(operation=operation, success=False, error_message=str(e))

    def execute_batch_operations(
        self, operations: list[DeleteOperation]
    ) -> tuple[list[OperationResult], list[OperationResult]]:
        """Execute deletions in order and return success/failure lists"""
        if not operations:
            return [], []

        successful_operations = []
        failed_operations = []

        for i, operation in enumerate(operations):
            if self.progress_callback:
                self.progress_callback(f"Deleting {operation.identifier} ({i + 1}/{len(operations)})")

            result = self.execute_operation(operation)
            if self.result_callback:
                self.result_callback(result)

            if result.success:
                successful_operations.append(result)
            else:
                failed_operations.append(result)

        return successful_operations, failed_operations

    def plan_operation(self, directory: pathlib.Path, record: FileRecord) -> DeleteOperation:
        """Create a planned deletion for a listed file"""
        return DeleteOperation(target_path=pathlib.Path(directory) / record.name, size=record.size)

    def plan_batch_operations(self, directory: pathlib.Path, records: list[FileRecord]) -> list[DeleteOperation]:
        """Create planned deletions for every record, keeping their order"""
        return [self.plan_operation(directory, record) for record in records]
