"""Named feature toggles attached to a run configuration."""

from collections.abc import ItemsView, Iterator, KeysView, Mapping
from typing import Any


class Flags:
    """Read-only collection of named flags.

    Values are copied on construction, so later changes to the source
    mapping do not leak into the flags.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Flags):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Flags({self._values!r})"

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def items(self) -> ItemsView[str, Any]:
        return self._values.items()

    def enabled(self, name: str) -> bool:
        """Return True if the flag is present and truthy."""
        return bool(self._values.get(name))

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)
