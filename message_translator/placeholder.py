import re
from typing import Dict, Optional, Union, Mapping
from .config import settings

ReplacementValue = Union[str, int, float, bool, None]
Replacements = Dict[str, ReplacementValue]

PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


def stringify_value(value) -> str:
    """Render a replacement or leaf value the way JSON prints it (True -> 'true', 3.0 -> '3')."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MessagePlaceholder:
    """Expands ${key} markers against call-site values, then instance defaults."""

    def __init__(self, missing: Optional[str] = None):
        self.missing = settings.MISSING_PLACEHOLDER if missing is None else missing
        self._defaults: Replacements = {}

    def fast_format(self, template: str, values: Optional[Mapping[str, ReplacementValue]] = None) -> str:
        values = values or {}

        def _sub(m):
            key = m.group(1)
            # falsy values (0, '', False) count as absent
            value = values.get(key) or self._defaults.get(key)
            return stringify_value(value) if value else self.missing

        return PLACEHOLDER_RE.sub(_sub, template)

    format = fast_format

    def add_default_replacements(self, additional: Optional[Mapping[str, ReplacementValue]]) -> None:
        if additional:
            self._defaults = {**self._defaults, **additional}

    def get_default_replacements(self) -> Replacements:
        return dict(self._defaults)

    def set_default_replacements(self, defaults: Optional[Mapping[str, ReplacementValue]]) -> None:
        self._defaults = dict(defaults or {})
