from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QDialogButtonBox

from src.ui.dialogs.project_dialog import ProjectDialog

PREFIX = "Ui.Dialogs.Project."


def test_cached_settings_round_trip(qtbot):
    dialog = ProjectDialog()
    qtbot.addWidget(dialog)
    dialog.set_values({'name': "Plant", 'author': "ops", 'comment': "a\nb"})

    cached = dialog.cached_settings()
    assert cached == {PREFIX + 'name': "Plant", PREFIX + 'author': "ops", PREFIX + 'comment': "a\nb"}

    other = ProjectDialog()
    qtbot.addWidget(other)
    other.set_cached_settings(cached)
    assert other.values() == dialog.values()


def test_partial_cache_keeps_other_fields(qtbot):
    dialog = ProjectDialog()
    qtbot.addWidget(dialog)
    dialog.set_values({'name': "Plant", 'author': "ops", 'comment': ""})
    dialog.set_cached_settings({PREFIX + 'name': "New"})
    assert dialog.values() == {'name': "New", 'author': "ops", 'comment': ""}


def test_prepare_sets_title_and_prefills(qtbot):
    dialog = ProjectDialog()
    qtbot.addWidget(dialog)
    dialog.prepare({})
    assert dialog.windowTitle() == "Project"

    dialog.prepare({'name': "Plant"}, "Edit Project")
    assert dialog.windowTitle() == "Edit Project"
    assert dialog.values()['name'] == "Plant"
    assert dialog.fill_data() == {'name': "Plant", 'author': "", 'comment': ""}


def test_get_settings_accept_and_reject(qtbot):
    dialog = ProjectDialog()
    qtbot.addWidget(dialog)

    QTimer.singleShot(0, lambda: dialog.button_box.button(QDialogButtonBox.Ok).click())
    result = dialog.get_settings({'name': "Plant", 'author': "ops", 'comment': ""})
    assert result == {'name': "Plant", 'author': "ops", 'comment': ""}

    QTimer.singleShot(0, dialog.reject)
    assert dialog.get_settings({'name': "Other"}) == {}
