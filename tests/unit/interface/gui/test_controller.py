from __future__ import annotations

"""
Unit tests for the GUI AppController.

Verifies rendering hand-off to the views, navigation intents, and the
background mutation flow (dialogs, worker dispatch, UI re-render and
error reporting) with threads and Tk scheduling executed inline.
"""

from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock, patch

import pytest

from programmanager.core.session import ProgramManagerSession
from programmanager.domain import constants as const
from programmanager.domain.operation_models import create_error_result
from programmanager.interface.gui.controllers.main_controller import AppController, failure_message

CTRL = "programmanager.interface.gui.controllers.main_controller"


class _InlineThread:
    """Stand-in for threading.Thread that runs the target on start()."""

    def __init__(self, target, args=(), daemon=None):
        self._target = target
        self._args = args

    def start(self) -> None:
        self._target(*self._args)


@pytest.fixture
def controller(storage_config: Dict[str, Any]):
    session = ProgramManagerSession(storage_config, save_config_func=MagicMock(return_value=True))
    session.refresh()

    mock_app = MagicMock()
    mock_app.after.side_effect = lambda _ms, fn: fn()

    ctrl = AppController(mock_app, session)
    ctrl.register_views(MagicMock(), MagicMock(), MagicMock(), MagicMock())

    with patch(f"{CTRL}.threading.Thread", _InlineThread):
        yield ctrl


@pytest.mark.gui
def test_register_views_wires_buttons(controller: AppController) -> None:
    controller.programs_view.btn_add.configure.assert_any_call(command=controller.add_program)
    controller.module_view.btn_delete.configure.assert_any_call(command=controller.delete_version)


@pytest.mark.gui
def test_selecting_program_renders_versions(controller: AppController) -> None:
    controller.on_select_program("Acme")

    args = controller.versions_view.render.call_args[0]
    assert [v.version for v in args[0]] == ["1.0", "2.0"]
    assert args[2] == "Acme"


@pytest.mark.gui
def test_delete_button_enabled_only_with_version(controller: AppController) -> None:
    controller.on_select_program("Acme")
    assert controller.module_view.render.call_args[1]["can_delete"] is False

    controller.on_select_version("1.0")
    assert controller.module_view.render.call_args[1]["can_delete"] is True


@pytest.mark.gui
def test_add_program_via_dialog(controller: AppController, storage_root: Path) -> None:
    with patch(f"{CTRL}.tk_helpers.ask_string", return_value="Gamma"):
        controller.add_program()

    assert (storage_root / "Gamma").is_dir()
    rendered = controller.programs_view.render.call_args[0][0]
    assert [p.name for p in rendered] == ["Acme", "Beta", "Gamma"]
    assert controller._task_running is False


@pytest.mark.gui
def test_cancelled_dialog_does_nothing(controller: AppController, storage_root: Path) -> None:
    with patch(f"{CTRL}.tk_helpers.ask_string", return_value=None):
        controller.add_program()

    assert sorted(p.name for p in storage_root.iterdir() if p.is_dir()) == ["Acme", "Beta"]


@pytest.mark.gui
def test_add_duplicate_program_shows_error(controller: AppController) -> None:
    with patch(f"{CTRL}.tk_helpers.ask_string", return_value="Acme"), \
            patch(f"{CTRL}.mb.showerror") as mock_error:
        controller.add_program()

    mock_error.assert_called_once()


@pytest.mark.gui
def test_delete_requires_confirmation(controller: AppController, storage_root: Path) -> None:
    controller.on_select_program("Acme")
    controller.on_select_version("1.0")

    with patch(f"{CTRL}.mb.askyesno", return_value=False):
        controller.delete_version()
    assert (storage_root / "Acme" / "1.0").exists()

    with patch(f"{CTRL}.mb.askyesno", return_value=True):
        controller.delete_version()
    assert not (storage_root / "Acme" / "1.0").exists()
    assert controller.session.state.selected_version is None


@pytest.mark.gui
def test_save_settings_switches_root(controller: AppController, tmp_path: Path) -> None:
    new_root = tmp_path / "other_root"

    controller.save_settings(str(new_root), "")

    assert controller.session.root_path == str(new_root)
    assert controller.programs_view.render.call_args[0][0] == ()


@pytest.mark.gui
def test_unexpected_task_exception_opens_crash_modal(controller: AppController) -> None:
    with patch(f"{CTRL}.crash_modal.show_crash_modal") as mock_modal:
        controller._run_task(MagicMock(side_effect=RuntimeError("boom")))

    assert mock_modal.call_args[0][0] == "boom"
    assert controller._task_running is False


@pytest.mark.gui
def test_busy_failures_are_not_shown(controller: AppController) -> None:
    with patch(f"{CTRL}.mb.showerror") as mock_error:
        controller._show_failure(create_error_result(const.ACTION_REFRESH, const.ERR_BUSY, "busy"))

    mock_error.assert_not_called()


def test_failure_message_falls_back_to_error_text() -> None:
    result = create_error_result("x", "unknown_kind", "raw text")
    assert failure_message(result) == "raw text"
