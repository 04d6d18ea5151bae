from __future__ import annotations

"""
Navigation State Model.

Holds the user's selection (program, version) and the set of expanded
module-tree directories as an immutable value. All changes go through the
pure transition functions below; `reconcile` is the single place where the
selection is checked against a freshly rebuilt hierarchy.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Sequence, Tuple

from programmanager.domain.hierarchy_models import Hierarchy, Node, find_program

# -----------------------------------------------------------------------------
# STATE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavigationState:
    """
    Selection and expansion view model.

    Attributes:
        selected_program: Name of the selected program, if any.
        selected_version: Name of the selected version under the selected
                          program, if any.
        expanded_paths: Absolute paths of expanded module-tree directories.
    """
    selected_program: Optional[str] = None
    selected_version: Optional[str] = None
    expanded_paths: FrozenSet[str] = field(default_factory=frozenset)

    def is_expanded(self, path: str) -> bool:
        return path in self.expanded_paths

# -----------------------------------------------------------------------------
# STATE TRANSITIONS
# -----------------------------------------------------------------------------

def reconcile(state: NavigationState, hierarchy: Hierarchy) -> NavigationState:
    """
    Drop selections that no longer resolve in a new hierarchy snapshot.

    Expanded paths are kept as-is: a path missing from the new tree simply
    has no visual effect.

    Args:
        state: Current navigation state.
        hierarchy: Freshly built hierarchy.

    Returns:
        NavigationState: The corrected state (same object if nothing changed).
    """
    if state.selected_program is None:
        if state.selected_version is None:
            return state
        return replace(state, selected_version=None)

    program = find_program(hierarchy, state.selected_program)
    if program is None:
        return replace(state, selected_program=None, selected_version=None)

    if state.selected_version is not None and program.find_version(state.selected_version) is None:
        return replace(state, selected_version=None)

    return state


def toggle_node(state: NavigationState, path: str) -> NavigationState:
    """Flip the expansion of one module-tree directory."""
    if path in state.expanded_paths:
        return replace(state, expanded_paths=state.expanded_paths - {path})
    return replace(state, expanded_paths=state.expanded_paths | {path})


def select_program(state: NavigationState, name: str) -> NavigationState:
    """Select a program. Versions are per-program, so the version is cleared."""
    return replace(state, selected_program=name, selected_version=None)


def select_version(state: NavigationState, version: str) -> NavigationState:
    """Select a version of the selected program; ignored without one."""
    if state.selected_program is None:
        return state
    return replace(state, selected_version=version)


def clear_version(state: NavigationState) -> NavigationState:
    return replace(state, selected_version=None)

# -----------------------------------------------------------------------------
# TREE PROJECTION
# -----------------------------------------------------------------------------

def visible_rows(
        modules: Sequence[Node],
        expanded_paths: FrozenSet[str]
) -> List[Tuple[Node, int]]:
    """
    Flatten a module tree into display rows honoring expansion.

    Children of a directory are emitted only if its path is expanded.

    Args:
        modules: Root-level nodes of a version.
        expanded_paths: Paths of expanded directories.

    Returns:
        List[Tuple[Node, int]]: (node, depth) pairs in display order.
    """
    rows: List[Tuple[Node, int]] = []

    def walk(nodes: Sequence[Node], depth: int) -> None:
        for node in nodes:
            rows.append((node, depth))
            if node.is_directory and node.path in expanded_paths:
                walk(node.children, depth + 1)

    walk(modules, 0)
    return rows


def collect_directory_paths(modules: Sequence[Node]) -> FrozenSet[str]:
    """Return the paths of every directory node in a module tree."""
    paths = set()
    stack = list(modules)
    while stack:
        node = stack.pop()
        if node.is_directory:
            paths.add(node.path)
            stack.extend(node.children)
    return frozenset(paths)
