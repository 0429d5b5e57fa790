"""Filesystem state of an open target."""

from enum import Enum


class TargetKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    MISSING = "missing"
