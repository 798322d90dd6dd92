"""Request header variants and header deletion strategies.

Callers may hand over headers in several shapes. They are narrowed once,
when a request record is built, to one of two immutable variants:

- MultiValueHeaders: ordered, case-insensitive, possibly multi-valued
  (built from ``httpx.Headers`` or a list of pairs). Supports append/delete.
- SimpleHeaders: a plain mapping. Keys keep the caller's spelling, so
  deletion scans keys and cookie injection overwrites a single key.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeAlias, cast

import httpx


class MultiValueHeaders:
    """Immutable ordered multimap of header pairs with case-insensitive lookup."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items: tuple[tuple[str, str], ...] = tuple(
            (str(name), str(value)) for name, value in items
        )

    def append(self, name: str, value: str) -> "MultiValueHeaders":
        """Return a copy with one more ``name: value`` entry at the end."""
        return MultiValueHeaders((*self._items, (name, value)))

    def delete(self, name: str) -> "MultiValueHeaders":
        """Return a copy without any entry named ``name`` (case-insensitive)."""
        lowered = name.lower()
        return MultiValueHeaders(
            (key, value) for key, value in self._items if key.lower() != lowered
        )

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return all values for ``name`` joined with ", ", or ``default``."""
        values = self.get_list(name)
        if not values:
            return default
        return ", ".join(values)

    def get_list(self, name: str) -> list[str]:
        lowered = name.lower()
        return [value for key, value in self._items if key.lower() == lowered]

    def multi_items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def to_dict(self) -> dict[str, str]:
        """Flatten to a dict, joining repeated names (used for logging)."""
        result: dict[str, str] = {}
        for key, value in self._items:
            result[key] = f"{result[key]}, {value}" if key in result else value
        return result

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.get_list(name))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiValueHeaders):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"MultiValueHeaders({list(self._items)!r})"


class SimpleHeaders(Mapping[str, str]):
    """Immutable plain-mapping headers; keys are kept exactly as given."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def merge(self, **values: str) -> "SimpleHeaders":
        """Shallow merge, later keys overwrite earlier ones of the same spelling."""
        return SimpleHeaders({**self._data, **values})

    def without_keys(self, keys: Iterable[str]) -> "SimpleHeaders":
        dropped = set(keys)
        return SimpleHeaders(
            {key: value for key, value in self._data.items() if key not in dropped}
        )

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SimpleHeaders({self._data!r})"


RequestHeaders: TypeAlias = MultiValueHeaders | SimpleHeaders


def to_header_variant(value: Any) -> RequestHeaders | None:
    """Narrow caller-supplied headers to one of the header variants.

    Args:
        value: None, a variant, ``httpx.Headers``, a mapping, or pairs.

    Returns:
        The matching variant, or None when no headers were given.

    Raises:
        TypeError: If the value is not a recognised header shape.
    """
    if value is None or isinstance(value, (MultiValueHeaders, SimpleHeaders)):
        return value
    if isinstance(value, httpx.Headers):
        return MultiValueHeaders(value.multi_items())
    if isinstance(value, Mapping):
        return SimpleHeaders({str(k): str(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return MultiValueHeaders(value)
    msg = f"Unsupported headers type: {type(value).__name__}"
    raise TypeError(msg)


def headers_to_dict(headers: RequestHeaders | None) -> dict[str, str]:
    """Flatten any header variant to a dict (for logging and redaction)."""
    if headers is None:
        return {}
    return headers.to_dict()


HeaderDeleter = Callable[[RequestHeaders | None, str], RequestHeaders | None]


def _do_nothing(headers: RequestHeaders | None, name: str) -> RequestHeaders | None:  # noqa: ARG001
    return headers


def _call_delete(headers: RequestHeaders | None, name: str) -> RequestHeaders | None:
    return cast(MultiValueHeaders, headers).delete(name)


def _delete_from_mapping(
    headers: RequestHeaders | None, name: str
) -> RequestHeaders | None:
    mapping = cast(SimpleHeaders, headers)
    return mapping.without_keys(key for key in mapping if key.lower() == name)


def identify_header_deleter(headers: RequestHeaders | None) -> HeaderDeleter:
    """Pick how to delete a header from the given representation.

    Args:
        headers: Header variant of the current request record.

    Returns:
        A no-op when there are no headers, the variant's own delete for
        MultiValueHeaders, or a key scan for SimpleHeaders. ``name`` passed
        to the deleter must be lower-case.
    """
    if headers is None:
        return _do_nothing
    if isinstance(headers, MultiValueHeaders):
        return _call_delete
    return _delete_from_mapping


def header_pairs(headers: RequestHeaders | None) -> list[tuple[str, str]]:
    """List ``(name, value)`` pairs of any header variant, repeats included."""
    if headers is None:
        return []
    if isinstance(headers, MultiValueHeaders):
        return headers.multi_items()
    return list(headers.items())


def has_header(headers: RequestHeaders | None, name: str) -> bool:
    """Check for a header by case-insensitive name in any variant."""
    lowered = name.lower()
    return any(key.lower() == lowered for key, _ in header_pairs(headers))


def lookup_header(headers: Any, name: str) -> Any:
    """Get a response header value by case-insensitive name.

    Works on any mapping (httpx, requests, plain dicts) and on objects with
    a ``get`` method. Returns the stored value as-is, or None if missing.
    """
    lowered = name.lower()
    if isinstance(headers, Mapping):
        for key, value in headers.items():
            if str(key).lower() == lowered:
                return value
        return None
    get = getattr(headers, "get", None)
    return get(name) if callable(get) else None
