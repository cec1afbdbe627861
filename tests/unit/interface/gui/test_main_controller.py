from __future__ import annotations

"""
Unit tests for the GUI AppController.

Views and dialogs are replaced by mocks, so no Tk display is required.
Verifies target selection, structure loading, prefix syncing, the
generation flow and session persistence.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("tkinter")

from treeforge.domain import config as cfg  # noqa: E402
from treeforge.interface.gui.controllers.main_controller import AppController  # noqa: E402

_MODULE = "treeforge.interface.gui.controllers.main_controller"


def _make_controller(prefix_on: bool = False, prefix: str = "") -> Tuple[AppController, MagicMock]:
    app_state: Dict[str, Any] = cfg.get_default_app_state()
    controller = AppController(MagicMock(), cfg.get_default_config(), app_state)
    view = MagicMock()
    view.chk_prefix.get.return_value = 1 if prefix_on else 0
    view.entry_prefix.get.return_value = prefix
    controller.register_views(view)
    return controller, view


@pytest.fixture
def structure_file(tmp_path: Path) -> Path:
    f = tmp_path / "layout.json"
    f.write_text(json.dumps({"a": {"b": None}, "c": None}), encoding="utf-8")
    return f

# -----------------------------------------------------------------------------
# Target Folder
# -----------------------------------------------------------------------------

@pytest.mark.gui
def test_set_target_accepts_writable_folder(tmp_path: Path) -> None:
    """TC-01: A writable folder becomes the session target."""
    controller, view = _make_controller()

    assert controller.set_target(str(tmp_path)) is True
    assert controller.session.target_path == str(tmp_path)
    view.lbl_target.configure.assert_called_once()
    # The permission probe leaves nothing behind
    assert list(tmp_path.iterdir()) == []


@pytest.mark.gui
def test_set_target_rejects_unwritable_folder() -> None:
    """TC-02: A folder failing the probe is rejected with an error dialog."""
    controller, _ = _make_controller()

    with patch(f"{_MODULE}.is_writable", return_value=False), patch(f"{_MODULE}.mb") as mock_mb:
        assert controller.set_target("/somewhere") is False

    mock_mb.showerror.assert_called_once()
    assert controller.session.target_path == ""


@pytest.mark.gui
def test_select_target_cancelled_dialog_changes_nothing() -> None:
    """TC-03: Cancelling the folder dialog keeps the previous target."""
    controller, _ = _make_controller()
    controller.session.target_path = "/keep"

    with patch(f"{_MODULE}.filedialog") as mock_fd:
        mock_fd.askdirectory.return_value = ""
        controller.select_target()

    assert controller.session.target_path == "/keep"

# -----------------------------------------------------------------------------
# Structure Loading
# -----------------------------------------------------------------------------

@pytest.mark.gui
def test_open_structure_success(structure_file: Path) -> None:
    """TC-04: A valid file loads the tree and reports the folder count."""
    controller, view = _make_controller()

    with patch(f"{_MODULE}.mb") as mock_mb:
        assert controller.open_structure(str(structure_file)) is True

    assert controller.session.tree is not None
    assert controller.session.structure_source == str(structure_file)
    message = mock_mb.showinfo.call_args[0][1]
    assert "Expected folders: 3" in message


@pytest.mark.gui
def test_open_structure_failure_clears_tree(tmp_path: Path, structure_file: Path) -> None:
    """TC-05: A failed load shows the error and discards the previous tree."""
    controller, view = _make_controller()
    with patch(f"{_MODULE}.mb"):
        controller.open_structure(str(structure_file))

    bad = tmp_path / "bad.yaml"
    bad.write_text("a: 5\n", encoding="utf-8")
    with patch(f"{_MODULE}.mb") as mock_mb:
        assert controller.open_structure(str(bad)) is False

    assert controller.session.tree is None
    mock_mb.showerror.assert_called_once()
    view.lbl_structure.configure.assert_called_with(text="Structure file: load failed")

# -----------------------------------------------------------------------------
# Naming Policy
# -----------------------------------------------------------------------------

@pytest.mark.gui
def test_prefix_toggle_syncs_policy() -> None:
    """TC-06: The checkbox and entry drive the session policy."""
    controller, view = _make_controller(prefix_on=True, prefix="C_")

    controller.on_prefix_toggled()
    view.set_prefix_entry_enabled.assert_called_with(True)
    assert controller.session.policy.active
    assert controller.session.policy.prefix == "C_"

    view.chk_prefix.get.return_value = 0
    controller.on_prefix_toggled()
    view.set_prefix_entry_enabled.assert_called_with(False)
    assert not controller.session.policy.active
    assert controller.session.policy.prefix == ""

# -----------------------------------------------------------------------------
# Generation
# -----------------------------------------------------------------------------

@pytest.mark.gui
def test_generate_requires_target_and_structure() -> None:
    """TC-07: Missing inputs stop before the confirmation dialog."""
    controller, _ = _make_controller()

    with patch(f"{_MODULE}.mb") as mock_mb:
        assert controller.generate() is None
        assert "target folder" in mock_mb.showerror.call_args[0][1]

        controller.session.target_path = "/t"
        assert controller.generate() is None
        assert "structure file" in mock_mb.showerror.call_args[0][1]
        mock_mb.askyesno.assert_not_called()


@pytest.mark.gui
def test_generate_declined_confirmation(tmp_path: Path, structure_file: Path) -> None:
    """TC-08: Answering 'no' creates nothing."""
    controller, _ = _make_controller()
    controller.session.target_path = str(tmp_path / "out")
    with patch(f"{_MODULE}.mb") as mock_mb:
        controller.open_structure(str(structure_file), notify=False)
        mock_mb.askyesno.return_value = False
        assert controller.generate() is None

    assert not (tmp_path / "out").exists()


@pytest.mark.gui
def test_generate_runs_and_streams_output(tmp_path: Path, structure_file: Path) -> None:
    """TC-09: A confirmed run creates folders and writes log and summary lines."""
    controller, view = _make_controller(prefix_on=True, prefix="P_")
    target = tmp_path / "out"
    target.mkdir()
    controller.set_target(str(target))

    with patch(f"{_MODULE}.mb") as mock_mb:
        controller.open_structure(str(structure_file), notify=False)
        mock_mb.askyesno.return_value = True
        result = controller.generate()

    assert result is not None and result.ok
    assert (target / "P_a" / "P_b").is_dir()
    assert 'Prefix: "P_"' in mock_mb.askyesno.call_args[0][1]

    written = [c.args[0] for c in view.append_output.call_args_list]
    assert f"Created: {target / 'P_a'}" in written
    assert "Created: 3 folders" in written
    view.clear_output.assert_called_once()
    mock_mb.showinfo.assert_called_once()
    view.btn_generate.configure.assert_called_with(state="normal")

# -----------------------------------------------------------------------------
# Session Persistence
# -----------------------------------------------------------------------------

@pytest.mark.gui
def test_on_closing_persists_session(isolated_config_file: Path, tmp_path: Path, structure_file: Path) -> None:
    """TC-10: Closing the window saves the session and destroys the app."""
    controller, _ = _make_controller(prefix_on=True, prefix="Z_")
    controller.set_target(str(tmp_path))
    with patch(f"{_MODULE}.mb"):
        controller.open_structure(str(structure_file))

    controller.on_closing()

    controller.app.destroy.assert_called_once()
    saved = cfg.load_config()
    assert saved == {
        "target_path": str(tmp_path),
        "structure_file": str(structure_file),
        "prefix_enabled": True,
        "prefix": "Z_",
    }


@pytest.mark.gui
def test_restore_session(tmp_path: Path, structure_file: Path) -> None:
    """TC-11: A saved session refills target, tree and prefix widgets."""
    controller, view = _make_controller()
    controller.config.update({
        "target_path": str(tmp_path),
        "structure_file": str(structure_file),
        "prefix_enabled": True,
        "prefix": "R_",
    })
    view.entry_prefix.get.return_value = "R_"
    view.chk_prefix.select.side_effect = lambda: setattr(view.chk_prefix.get, "return_value", 1)

    with patch(f"{_MODULE}.mb") as mock_mb:
        controller.restore_session()
        mock_mb.showinfo.assert_not_called()

    assert controller.session.target_path == str(tmp_path)
    assert controller.session.tree is not None
    view.entry_prefix.insert.assert_called_once_with(0, "R_")
    assert controller.session.policy.prefix == "R_"
