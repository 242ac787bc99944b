"""
Path handling for the package layout.

The installer works relative to a root directory holding a ``bin``
directory of binary variants and the link target.
"""

import os
from typing import Union


PathLike = Union[str, os.PathLike[str]]


def package_root() -> str:
    """Directory of the installed ppx_install package."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def resolve(base: PathLike, path: PathLike) -> str:
    """Resolve ``path`` against ``base`` unless it is already absolute."""
    path_str = os.path.expanduser(str(path))
    if os.path.isabs(path_str):
        return os.path.normpath(path_str)
    return os.path.normpath(os.path.join(str(base), path_str))


def relative_to_link(source: PathLike, link: PathLike) -> str:
    """
    Express ``source`` relative to the directory containing ``link``.

    Symlinks written this way stay valid when the whole tree is moved.
    """
    link_dir = os.path.dirname(os.path.abspath(str(link)))
    return os.path.relpath(os.path.abspath(str(source)), link_dir)


def variant_filename(binary_name: str, platform: str) -> str:
    """File name of a binary variant, e.g. ``graphql_ppx.linux``."""
    return f"{binary_name}.{platform}"
