from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QPlainTextEdit, QDialogButtonBox
)

from src.core.settings_binder import PrefixedFieldBinder
from src.core.strings import ProjectDialogStrings, ProjectStrings
from src.models.settings_models import SettingsMap


class ProjectDialog(QDialog):
    """
    Edits the name, author and comment of a project.

    The dialog remembers its last values across sessions through
    cached_settings()/set_cached_settings() (prefixed keys), while
    get_settings() exchanges values with the caller using bare keys.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        s = ProjectStrings.instance()
        ds = ProjectDialogStrings.instance()
        self.binder = PrefixedFieldBinder(
            ds.settings_prefix,
            {s.name: str, s.author: str, s.comment: str},
            default_title=ds.title,
        )
        self.setWindowTitle(ds.title)
        self.resize(420, 300)

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.ln_name = QLineEdit()
        form.addRow("Name:", self.ln_name)

        self.ln_author = QLineEdit()
        form.addRow("Author:", self.ln_author)

        self.txt_comment = QPlainTextEdit()
        form.addRow("Comment:", self.txt_comment)
        layout.addLayout(form)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def values(self) -> dict:
        s = ProjectStrings.instance()
        return {
            s.name: self.ln_name.text(),
            s.author: self.ln_author.text(),
            s.comment: self.txt_comment.toPlainText(),
        }

    def set_values(self, values: dict):
        s = ProjectStrings.instance()
        self.ln_name.setText(values[s.name])
        self.ln_author.setText(values[s.author])
        self.txt_comment.setPlainText(values[s.comment])

    def cached_settings(self) -> SettingsMap:
        return self.binder.to_cache(self.values())

    def set_cached_settings(self, settings: dict):
        values = self.values()
        self.binder.from_cache(settings, values)
        self.set_values(values)

    def fill_form(self, settings: dict):
        values = self.values()
        self.binder.fill_form(settings, values)
        self.set_values(values)

    def fill_data(self) -> SettingsMap:
        return self.binder.fill_data(self.values())

    def prepare(self, settings: dict, title: str = ""):
        """Set the title and pre-fill the form before the dialog is shown."""
        window_title, values = self.binder.apply_form(settings, self.values(), title)
        self.setWindowTitle(window_title)
        self.set_values(values)

    def get_settings(self, settings: dict, title: str = "") -> SettingsMap:
        """Run the dialog modally. Returns the edited values, or an empty map on cancel."""
        self.prepare(settings, title)
        if self.exec() == QDialog.Accepted:
            return self.fill_data()
        return SettingsMap()
