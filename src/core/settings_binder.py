"""
Two-way copy between a SettingsMap and a set of named field values.

Two key conventions live side by side and are kept in separate methods:

- cache keys (`to_cache` / `from_cache`): `prefix + field`, used when the
  values are persisted together with other owners in one settings map;
- form keys (`fill_form` / `fill_data`): the bare field name, used when a
  caller hands values to a form and gets the edited values back.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from src.models.settings_models import CoercionHook, SettingsMap, coerce

logger = logging.getLogger(__name__)


class PrefixedFieldBinder:
    """
    Binds a fixed set of fields to settings keys under a namespace prefix.

    `fields` maps field name -> expected type (str, bool or list). Field
    values are exchanged as a plain dict keyed by field name.
    """

    def __init__(self, prefix: str, fields: Dict[str, type], default_title: str = "",
                 on_coerce: Optional[CoercionHook] = None):
        self.prefix = prefix
        self.fields = dict(fields)
        self.default_title = default_title
        self.on_coerce = on_coerce

    def key(self, field: str) -> str:
        return self.prefix + field

    # -- Cache (prefixed keys) ---------------------------------------------
    def to_cache(self, values: Dict[str, Any]) -> SettingsMap:
        """Write `prefix + field -> value` for every registered field."""
        m = SettingsMap()
        for field in self.fields:
            m[self.key(field)] = values.get(field)
        return m

    def from_cache(self, settings: Dict[str, Any], values: Dict[str, Any]):
        """
        Overwrite the fields whose prefixed key is present in `settings`.

        Missing keys leave the field untouched, so partial maps are valid.
        """
        for field, expected in self.fields.items():
            key = self.key(field)
            if key in settings:
                values[field] = coerce(settings[key], expected, key, self.on_coerce)

    # -- Form (bare keys) --------------------------------------------------
    def fill_form(self, settings: Dict[str, Any], values: Dict[str, Any]):
        """Pre-fill every field from the bare field names of `settings`."""
        for field, expected in self.fields.items():
            values[field] = coerce(settings.get(field, expected()), expected, field, self.on_coerce)

    def fill_data(self, values: Dict[str, Any]) -> SettingsMap:
        m = SettingsMap()
        for field in self.fields:
            m[field] = values.get(field)
        return m

    def apply_form(self, settings: Dict[str, Any], values: Dict[str, Any],
                   title: str = "") -> Tuple[str, Dict[str, Any]]:
        """
        Prepare a form for presentation.

        Returns the window title (the caller's, or the default one when empty)
        and the field values, pre-filled from `settings` when it is non-empty.
        """
        if settings:
            self.fill_form(settings, values)
        return (title or self.default_title), values
