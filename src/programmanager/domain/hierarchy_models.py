from __future__ import annotations

"""
Storage Hierarchy Data Models.

Recursive, immutable value types describing one snapshot of the storage
root: programs, their versions, and each version's module tree. A snapshot
is never mutated; every refresh produces a new one.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    One entry (file or directory) of a version's module tree.

    Attributes:
        name: Display label (last path segment).
        path: Absolute filesystem path; unique within the tree.
        is_directory: Directory flag.
        children: Ordered child nodes. Always empty for files and for
                  directories that could not be read.
    """
    name: str
    path: str
    is_directory: bool
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Version:
    """
    A version directory directly under a program.

    Attributes:
        version: Display name (directory name).
        path: Absolute directory path.
        modules: Root-level nodes of the version's module tree.
    """
    version: str
    path: str
    modules: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Program:
    """
    A program directory directly under the storage root.

    Attributes:
        name: Display name (directory name).
        path: Absolute directory path.
        versions: Versions in directory-sort order.
    """
    name: str
    path: str
    versions: Tuple[Version, ...] = ()

    def find_version(self, version: Optional[str]) -> Optional[Version]:
        """Return the version with the given name, if present."""
        if version is None:
            return None
        for v in self.versions:
            if v.version == version:
                return v
        return None


Hierarchy = Tuple[Program, ...]


def find_program(hierarchy: Hierarchy, name: Optional[str]) -> Optional[Program]:
    """Return the program with the given name from a snapshot, if present."""
    if name is None:
        return None
    for program in hierarchy:
        if program.name == name:
            return program
    return None


def find_version(
        hierarchy: Hierarchy,
        program: Optional[str],
        version: Optional[str]
) -> Optional[Version]:
    """Resolve a (program, version) pair against a snapshot."""
    prog = find_program(hierarchy, program)
    if prog is None:
        return None
    return prog.find_version(version)
