from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JsonOptions:
    """JSON settings shared by the file store and HTTP responses."""

    case_insensitive: bool = True
    indent: int | None = 2
    ensure_ascii: bool = True

    def dumps(self, payload: Any) -> str:
        return json.dumps(payload, indent=self.indent, ensure_ascii=self.ensure_ascii)

    def loads(self, raw: str) -> Any:
        return json.loads(raw)

    def match_fields(self, data: dict[str, Any], names: list[str]) -> dict[str, Any]:
        """Rebind keys of ``data`` onto the canonical ``names``.

        Keys without a canonical counterpart are dropped.
        """
        if not self.case_insensitive:
            return {name: data[name] for name in names if name in data}
        canonical = {name.lower(): name for name in names}
        matched: dict[str, Any] = {}
        for key, value in data.items():
            name = canonical.get(str(key).lower())
            if name is not None and name not in matched:
                matched[name] = value
        return matched


DEFAULT_JSON_OPTIONS = JsonOptions()
