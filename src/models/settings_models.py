"""
Settings map and value coercion helpers.

A SettingsMap is the serialization boundary between components and the
persistence medium. Several owners write into the same map, each under its
own key namespace, so values stay loosely typed until a reader coerces them
into the type it expects.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

SettingsValue = Union[str, bool, int, float, List[str]]

# Called as hook(key, raw_value, coerced_value) whenever coercion changes a value
CoercionHook = Callable[[str, Any, Any], None]

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off", "")


class SettingsMap(dict):
    """
    Ordered string-keyed mapping of settings values.

    Plain dict semantics (insertion order, re-insertion overwrites) plus a
    couple of helpers used by the save/load code paths.
    """

    def merge(self, other: Dict[str, Any]) -> "SettingsMap":
        """Overwrite this map with every key of `other`. Returns self."""
        for key, value in other.items():
            self[key] = value
        return self

    def with_prefix(self, prefix: str) -> "SettingsMap":
        """Return the subset of keys starting with `prefix`."""
        return SettingsMap((k, v) for k, v in self.items() if k.startswith(prefix))


def _report(key: str, raw: Any, coerced: Any, hook: Optional[CoercionHook]):
    logger.debug(f"Coerced setting '{key}': {raw!r} -> {coerced!r}")
    if hook is not None:
        hook(key, raw, coerced)


def to_bool(value: Any, key: str = "", hook: Optional[CoercionHook] = None) -> bool:
    """
    Best-effort conversion to bool.

    Anything that does not look like a boolean becomes False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        result = value != 0
    elif isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
        result = True
    else:
        result = False
    # Textual booleans from INI files are the normal case, not worth reporting
    if not (isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS + _FALSE_STRINGS):
        _report(key, value, result, hook)
    return result


def to_str(value: Any, key: str = "", hook: Optional[CoercionHook] = None) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        result = ""
    elif isinstance(value, bool):
        result = "true" if value else "false"
    elif isinstance(value, (int, float)):
        result = str(value)
    else:
        # Lists and other containers have no string form
        result = ""
    _report(key, value, result, hook)
    return result


def to_str_list(value: Any, key: str = "", hook: Optional[CoercionHook] = None) -> List[str]:
    """
    Best-effort conversion to a list of strings.

    A single string becomes a one-element list (that is how INI files hand
    back one-element lists). Values of any other type are dropped.
    """
    if isinstance(value, (list, tuple)):
        result = [str(v) for v in value]
        if any(not isinstance(v, str) for v in value):
            _report(key, value, result, hook)
        return result
    if isinstance(value, str):
        return [value] if value else []
    result = []
    if value is not None:
        _report(key, value, result, hook)
    return result


_CONVERTERS = {
    bool: to_bool,
    str: to_str,
    list: to_str_list,
}


def coerce(value: Any, expected: type, key: str = "", hook: Optional[CoercionHook] = None) -> Any:
    """Convert `value` to the `expected` type (bool, str or list)."""
    try:
        converter = _CONVERTERS[expected]
    except KeyError:
        raise TypeError(f"Unsupported settings type: {expected!r}")
    return converter(value, key, hook)
