from __future__ import annotations

from typing import Callable, Mapping, Sequence

from sortjson.json_types import JSONValue

OrderKey = tuple[int, int, str]


def custom_order_key(sort_order: Sequence[str]) -> Callable[[str], OrderKey]:
    """Key function placing `sort_order` keys first, in their declared order.

    Keys not listed follow, ordered by code point. Used with the stable
    built-in sort so the ranking is fully deterministic.
    """
    positions: dict[str, int] = {}
    for position, key in enumerate(sort_order):
        positions.setdefault(key, position)

    def _key(item: str) -> OrderKey:
        position = positions.get(item)
        if position is None:
            return (1, 0, item)
        return (0, position, "")

    return _key


def sort_keys_from_depth(
    value: JSONValue,
    sort_from: int,
    sort_order: Sequence[str] | None = None,
) -> JSONValue:
    """Return a copy of `value` with mapping keys sorted from depth `sort_from`.

    Depth counts mapping levels from the root (0); arrays are transparent and
    never reordered. Mappings shallower than `sort_from` keep their key order
    but their values are still processed. `sort_order` only applies to the
    root mapping, and only when the root itself is sorted.
    """
    if sort_from < 0:
        raise ValueError(f"sort_from must be non-negative, got {sort_from}")
    root_key = custom_order_key(sort_order) if sort_order else None
    return _sort_value(value, sort_from=sort_from, depth=0, root_key=root_key)


def sort_keys(value: JSONValue) -> JSONValue:
    """Sort every mapping in `value`, root included."""
    return sort_keys_from_depth(value, 0)


def sort_keys_shallow(value: JSONValue) -> JSONValue:
    """Sort the root mapping only; nested values are returned untouched."""
    if isinstance(value, Mapping):
        return {key: value[key] for key in sorted(value)}
    return value


def _sort_value(
    value: object,
    *,
    sort_from: int,
    depth: int,
    root_key: Callable[[str], OrderKey] | None,
) -> JSONValue:
    if isinstance(value, Mapping):
        items = [(str(key), item_value) for key, item_value in value.items()]
        if depth >= sort_from:
            if depth == 0 and root_key is not None:
                items = sorted(items, key=lambda item: root_key(item[0]))
            else:
                # Code-point order, independent of locale.
                items = sorted(items, key=lambda item: item[0])
        return {
            key: _sort_value(
                item_value,
                sort_from=sort_from,
                depth=depth + 1,
                root_key=root_key,
            )
            for key, item_value in items
        }
    if isinstance(value, (list, tuple)):
        return [
            _sort_value(item, sort_from=sort_from, depth=depth, root_key=root_key)
            for item in value
        ]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    raise TypeError(
        f"sort_keys_from_depth does not support value type {type(value).__name__}"
    )
