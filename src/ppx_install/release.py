# Copyright (c) 2024 graphql-ppx Contributors
# MIT License

"""ppx-install release metadata."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "graphql-ppx Contributors"
