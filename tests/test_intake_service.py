import pytest

from conftest import make_candidate
from pdfsnap.models import Severity
from pdfsnap.models.workspace import PLACEHOLDER_NAME, PLACEHOLDER_SIZE
from pdfsnap.services.intake_service import FileIntake
from pdfsnap.utils.file_utils import format_size


@pytest.fixture
def intake(workspace, notifier, storage):
    return FileIntake(workspace, notifier, storage)


def test_valid_image_is_staged(intake, workspace, notifier):
    candidate = make_candidate("photo.png")

    assert intake.select_file(candidate)

    assert workspace.selected.name == "photo.png"
    assert workspace.selected.path.read_bytes() == candidate.content
    assert workspace.display_name == candidate.name
    assert workspace.display_size == format_size(candidate.size)
    assert workspace.preview_visible
    assert notifier.history[-1].severity is Severity.success


@pytest.mark.parametrize("media_type", ["image/gif", "application/pdf", "text/plain", ""])
def test_invalid_type_keeps_previous_selection(intake, workspace, notifier, media_type):
    intake.select_file(make_candidate("first.jpg", "image/jpeg"))
    staged = workspace.selected
    notifier.history.clear()

    assert not intake.select_file(make_candidate("notes.txt", media_type, b"hello"))

    assert workspace.selected is staged
    assert workspace.display_name == "first.jpg"
    assert [toast.severity for toast in notifier.history] == [Severity.error]
    assert "valid image" in notifier.current.text


def test_invalid_type_on_empty_workspace(intake, workspace):
    assert not intake.select_file(make_candidate("anim.gif", "image/gif"))
    assert workspace.selected is None
    assert workspace.display_name == PLACEHOLDER_NAME


def test_new_selection_replaces_and_removes_old_file(intake, workspace):
    intake.select_file(make_candidate("a.png"))
    old_path = workspace.selected.path

    intake.select_file(make_candidate("b.webp", "image/webp"))

    assert workspace.selected.name == "b.webp"
    assert not old_path.exists()


def test_clear_restores_placeholders(intake, workspace, notifier):
    intake.select_file(make_candidate("photo.png"))
    path = workspace.selected.path

    intake.clear()

    assert workspace.selected is None
    assert workspace.display_name == PLACEHOLDER_NAME
    assert workspace.display_size == PLACEHOLDER_SIZE
    assert not workspace.preview_visible
    assert not path.exists()
    assert notifier.current.severity is Severity.info


def test_drop_stages_first_file(intake, workspace):
    assert intake.drop([make_candidate("one.png"), make_candidate("two.png")])

    assert workspace.selected.name == "one.png"


def test_invalid_drop_is_rejected(intake, workspace, notifier):
    assert not intake.drop([make_candidate("doc.pdf", "application/pdf")])
    assert workspace.selected is None
    assert notifier.current.severity is Severity.error


def test_empty_drop_is_ignored(intake, workspace, notifier):
    assert not intake.drop([])
    assert workspace.selected is None
    assert notifier.history == []
