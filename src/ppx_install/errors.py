# Copyright (c) 2024 graphql-ppx Contributors
# MIT License

"""
ppx-install Error Classes.

All custom exceptions carry the process exit code the CLI reports for them.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Process exit codes for ppx-install."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    FILESYSTEM_ERROR = 2
    CONFIG_ERROR = 3
    UNSUPPORTED_PLATFORM = 4
    KEYBOARD_INTERRUPT = 130


class PpxInstallError(Exception):
    """Base exception for all ppx-install errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class UnsupportedPlatformError(PpxInstallError):
    """The host platform has no usable binary variant."""

    exit_code: int = ExitCode.UNSUPPORTED_PLATFORM

    def __init__(self, platform: str, suggestion: str | None = None) -> None:
        self.platform = platform
        msg = f"{platform} is not yet supported"
        if suggestion:
            msg += f"\n  Suggestion: {suggestion}"
        super().__init__(msg)


class FilesystemError(PpxInstallError):
    """Removing or creating the link target failed."""

    exit_code: int = ExitCode.FILESYSTEM_ERROR

    def __init__(self, operation: str, path: str, cause: OSError | None = None) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause

        details = None
        if cause is not None:
            details = cause.strerror or str(cause)
            if cause.errno is not None:
                details = f"errno={cause.errno}; {details}"

        super().__init__(f"Could not {operation} {path}", details)


class ConfigError(PpxInstallError):
    """Error in a configuration file or override."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Config error{location}: {message}")
