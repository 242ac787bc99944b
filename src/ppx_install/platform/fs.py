"""
Filesystem operations for the link target.

Failures are reported as FilesystemError carrying the underlying OSError.
"""

import os

from ppx_install.errors import FilesystemError
from .paths import PathLike


def lexists(path: PathLike) -> bool:
    """Check if anything exists at path, including a dangling symlink."""
    return os.path.lexists(str(path))


def is_symlink(path: PathLike) -> bool:
    """Check if path is a symbolic link."""
    return os.path.islink(str(path))


def read_link(path: PathLike) -> str | None:
    """Return the raw target of a symlink, or None if path is not one."""
    if not is_symlink(path):
        return None
    return os.readlink(str(path))


def remove_existing(path: PathLike) -> bool:
    """
    Remove a file or symlink at path if one exists.

    Returns True if something was removed. Directories are left alone
    and reported as errors.
    """
    path_str = str(path)
    if not lexists(path_str):
        return False
    try:
        os.remove(path_str)
    except OSError as e:
        raise FilesystemError("remove", path_str, e) from e
    return True


def symlink(src: PathLike, dst: PathLike) -> None:
    """Create a symbolic link at dst pointing to src."""
    try:
        os.symlink(str(src), str(dst))
    except OSError as e:
        raise FilesystemError("create symlink", str(dst), e) from e


def replace_symlink(src: PathLike, dst: PathLike) -> bool:
    """
    Atomically point dst at src, replacing whatever file or link is there.

    The link is created under a temporary name in the same directory and
    renamed over dst, so dst is never missing and a failed swap leaves the
    old entry in place. A directory at dst is not replaced.

    Returns True if a previous entry was replaced.
    """
    dst_str = str(dst)
    replaced = lexists(dst_str)
    tmp_path = os.path.join(
        os.path.dirname(dst_str) or ".",
        f".{os.path.basename(dst_str)}.{os.getpid()}.tmp",
    )

    remove_existing(tmp_path)
    try:
        os.symlink(str(src), tmp_path)
    except OSError as e:
        raise FilesystemError("create symlink", dst_str, e) from e

    try:
        os.replace(tmp_path, dst_str)
    except OSError as e:
        if lexists(tmp_path):
            os.remove(tmp_path)
        raise FilesystemError("replace", dst_str, e) from e
    return replaced
