from __future__ import annotations

"""
Unit tests for the Navigation State Model.

Verifies reconciliation against rebuilt hierarchies, the pure selection
transitions, and the flattening of module trees into display rows.
"""

from programmanager.domain.hierarchy_models import Node, Program, Version
from programmanager.domain.navigation import (
    NavigationState,
    clear_version,
    collect_directory_paths,
    reconcile,
    select_program,
    select_version,
    toggle_node,
    visible_rows,
)

HIERARCHY = (
    Program(name="Acme", path="/r/Acme", versions=(
        Version(version="1.0", path="/r/Acme/1.0"),
        Version(version="2.0", path="/r/Acme/2.0"),
    )),
    Program(name="Beta", path="/r/Beta"),
)

MODULES = (
    Node(name="src", path="/v/src", is_directory=True, children=(
        Node(name="pkg", path="/v/src/pkg", is_directory=True, children=(
            Node(name="mod.py", path="/v/src/pkg/mod.py", is_directory=False),
        )),
        Node(name="main.py", path="/v/src/main.py", is_directory=False),
    )),
    Node(name="README.md", path="/v/README.md", is_directory=False),
)


# -----------------------------------------------------------------------------
# RECONCILIATION
# -----------------------------------------------------------------------------

def test_reconcile_keeps_valid_selection() -> None:
    state = NavigationState(selected_program="Acme", selected_version="2.0")
    assert reconcile(state, HIERARCHY) is state


def test_reconcile_missing_program_clears_both() -> None:
    state = NavigationState(selected_program="Ghost", selected_version="1.0")
    result = reconcile(state, HIERARCHY)
    assert result.selected_program is None
    assert result.selected_version is None


def test_reconcile_missing_version_keeps_program() -> None:
    state = NavigationState(selected_program="Acme", selected_version="3.0")
    result = reconcile(state, HIERARCHY)
    assert result.selected_program == "Acme"
    assert result.selected_version is None


def test_reconcile_drops_orphan_version() -> None:
    state = NavigationState(selected_version="1.0")
    assert reconcile(state, HIERARCHY).selected_version is None


def test_reconcile_keeps_expanded_paths() -> None:
    state = NavigationState(selected_program="Ghost", expanded_paths=frozenset({"/gone"}))
    assert reconcile(state, ()).expanded_paths == frozenset({"/gone"})


def test_reconcile_against_empty_hierarchy() -> None:
    state = NavigationState(selected_program="Acme", selected_version="1.0")
    assert reconcile(state, ()) == NavigationState()


# -----------------------------------------------------------------------------
# TRANSITIONS
# -----------------------------------------------------------------------------

def test_select_program_resets_version() -> None:
    state = NavigationState(selected_program="Acme", selected_version="1.0")
    result = select_program(state, "Beta")
    assert (result.selected_program, result.selected_version) == ("Beta", None)


def test_select_version_requires_program() -> None:
    state = NavigationState()
    assert select_version(state, "1.0") is state
    assert select_version(NavigationState(selected_program="Acme"), "1.0").selected_version == "1.0"


def test_toggle_node_flips_expansion() -> None:
    state = toggle_node(NavigationState(), "/v/src")
    assert state.is_expanded("/v/src")
    assert not toggle_node(state, "/v/src").is_expanded("/v/src")


def test_clear_version() -> None:
    state = NavigationState(selected_program="Acme", selected_version="1.0")
    assert clear_version(state).selected_version is None
    assert clear_version(state).selected_program == "Acme"


# -----------------------------------------------------------------------------
# TREE PROJECTION
# -----------------------------------------------------------------------------

def test_collapsed_tree_shows_roots_only() -> None:
    rows = visible_rows(MODULES, frozenset())
    assert [(n.name, d) for n, d in rows] == [("src", 0), ("README.md", 0)]


def test_expanded_child_hidden_under_collapsed_parent() -> None:
    """Expansion of a nested dir has no effect while its parent is collapsed."""
    rows = visible_rows(MODULES, frozenset({"/v/src/pkg"}))
    assert [n.name for n, _ in rows] == ["src", "README.md"]


def test_fully_expanded_tree() -> None:
    rows = visible_rows(MODULES, collect_directory_paths(MODULES))
    assert [(n.name, d) for n, d in rows] == [
        ("src", 0), ("pkg", 1), ("mod.py", 2), ("main.py", 1), ("README.md", 0)
    ]


def test_collect_directory_paths() -> None:
    assert collect_directory_paths(MODULES) == frozenset({"/v/src", "/v/src/pkg"})
