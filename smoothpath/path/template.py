from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from smoothpath.path.format import format_number

_FIELD = re.compile(r"\\?\{([^{}]+)\}")


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def substitute(template: str, data: Optional[Mapping[str, Any]]) -> str:
    """Replace ``{name}`` fields of ``template`` with values from ``data``.

    A backslash before the brace keeps the field literally (``\\{x}`` gives
    ``{x}``). Missing fields and ``None`` render as an empty string; numbers
    use the same formatting as path data, so ``0`` stays ``0``.
    """
    if not template or not data:
        return template

    def _repl(m: re.Match) -> str:
        whole = m.group(0)
        if whole.startswith("\\"):
            return whole[1:]
        return _render(data.get(m.group(1)))

    return _FIELD.sub(_repl, template)
