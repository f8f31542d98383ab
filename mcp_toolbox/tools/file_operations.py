"""Tool: Sandboxed file system operations."""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mcp_toolbox.errors import ResourceNotFoundError, ToolValidationError
from mcp_toolbox.tools.base import BaseTool
from mcp_toolbox.tools.schema import FieldSpec, FieldType, InputSchema

logger = logging.getLogger(__name__)

OPERATIONS = ("read", "write", "list", "delete", "exists")


@dataclass(frozen=True)
class FileOperationInput:
    operation: str
    path: Path
    content: str | None = None


class FileOperationsTool(BaseTool[FileOperationInput]):
    """
    Tool for reading and writing files inside a set of allowed directories.

    The allow-list check runs against the resolved target and against the
    entry itself, so ``..`` segments and links cannot escape the sandbox.
    Operations act on the path as given; deleting a link removes the link.
    """

    name = "file_operations"
    description = (
        "Performs safe file system operations including read, write, "
        "list, delete, and exists checks"
    )
    input_schema = InputSchema(
        fields=(
            FieldSpec(
                "operation",
                FieldType.ENUM,
                description="The file operation to perform",
                required=True,
                values=OPERATIONS,
            ),
            FieldSpec(
                "path",
                FieldType.STRING,
                description="The file or directory path",
                required=True,
            ),
            FieldSpec(
                "content",
                FieldType.STRING,
                description="Content to write (required for write operation)",
            ),
        )
    )

    def __init__(self, allowed_directories: list[Path]):
        """
        Initialize file operations tool.

        Args:
            allowed_directories: Base directories the tool may touch
        """
        if not allowed_directories:
            raise ValueError("At least one allowed directory is required")
        self.allowed_directories = [Path(d).resolve() for d in allowed_directories]

    def parse_input(self, values: dict[str, Any]) -> FileOperationInput:
        raw_path: str = values["path"]
        if not raw_path.strip():
            raise ToolValidationError("path cannot be empty", "path")
        if "\x00" in raw_path:
            raise ToolValidationError("Invalid path: embedded null byte", "path")

        operation = values["operation"]
        content = values.get("content")
        if operation == "write" and content is None:
            raise ToolValidationError(
                "content is required for write operation", "content"
            )

        # Lexical absolute path: symlinks are not followed here, so delete
        # removes a link rather than its target
        return FileOperationInput(
            operation=operation,
            path=Path(os.path.abspath(os.path.expanduser(raw_path))),
            content=content,
        )

    def _check_allowed(self, path: Path) -> None:
        """
        Reject paths that leave the allowed directories.

        Both the fully resolved target and the entry itself (parent resolved,
        last component kept) must lie inside an allowed directory.
        """
        try:
            resolved = path.resolve()
            targets = (resolved, path.parent.resolve() / path.name)
            # non-strict resolution leaves a looping link unresolved
            looping = resolved.is_symlink()
        except (ValueError, OSError, RuntimeError) as e:
            raise ToolValidationError(f"Invalid path: {e}", "path")
        if looping:
            raise ToolValidationError(f"Invalid path: symlink loop at {resolved}", "path")

        for target in targets:
            if not any(target.is_relative_to(base) for base in self.allowed_directories):
                allowed = ", ".join(str(d) for d in self.allowed_directories)
                raise ToolValidationError(
                    f"Access denied. Path must be within allowed directories: {allowed}",
                    "path",
                )

    async def run(self, params: FileOperationInput) -> dict[str, Any]:
        path = params.path
        await asyncio.to_thread(self._check_allowed, path)

        result: dict[str, Any] = {
            "success": True,
            "operation": params.operation,
            "path": str(path),
        }

        if params.operation == "read":
            result["data"] = await asyncio.to_thread(_read_file, path)
            result["message"] = "File read successfully"

        elif params.operation == "write":
            await asyncio.to_thread(_write_file, path, params.content)
            result["message"] = "File written successfully"

        elif params.operation == "list":
            entries = await asyncio.to_thread(_list_directory, path)
            result["data"] = entries
            result["message"] = f"Found {len(entries)} entries"

        elif params.operation == "delete":
            await asyncio.to_thread(_delete_file, path)
            result["message"] = "File deleted successfully"

        elif params.operation == "exists":
            exists = await asyncio.to_thread(path.exists)
            result["exists"] = exists
            result["data"] = "File exists" if exists else "File does not exist"
            result["message"] = result["data"]

        logger.info(f"file_operations {params.operation} on {path}")
        return result


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ResourceNotFoundError(f"File not found: {path}", "path")
    except IsADirectoryError:
        raise ToolValidationError(f"Path is a directory: {path}", "path")


def _write_file(path: Path, content: str) -> None:
    if path.is_dir():
        raise ToolValidationError(f"Path is a directory: {path}", "path")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _list_directory(path: Path) -> list[str]:
    if not path.exists():
        raise ResourceNotFoundError(f"Directory not found: {path}", "path")
    if not path.is_dir():
        raise ToolValidationError(f"Not a directory: {path}", "path")
    return [
        ("[DIR] " if entry.is_dir() else "[FILE] ") + entry.name
        for entry in sorted(path.iterdir(), key=lambda p: p.name)
    ]


def _delete_file(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        raise ToolValidationError(f"Path is a directory: {path}", "path")
    try:
        path.unlink()
    except FileNotFoundError:
        raise ResourceNotFoundError(f"File not found: {path}", "path")
