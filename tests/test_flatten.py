import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nested_csv.errors import PathConflict
from nested_csv.key_mapping import PathCodec, flatten, unflatten


_NAMES = st.text(alphabet=string.ascii_letters, min_size=1, max_size=8)
_SCALARS = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-10_000, max_value=10_000)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=20)
)
_TREES = st.recursive(
    _SCALARS,
    lambda children: st.lists(children, min_size=1, max_size=4)
    | st.dictionaries(_NAMES, children, min_size=1, max_size=4),
    max_leaves=20,
)


def test_flatten_nested_objects() -> None:
    value = {"user": {"name": "John", "address": {"city": "NYC"}}}
    assert flatten(value) == {"user__name": "John", "user__address__city": "NYC"}


def test_flatten_arrays_use_indices() -> None:
    value = {"items": [{"id": 1, "name": "Apple"}, {"id": 2, "name": "Orange"}], "tags": ["a", "b"]}
    assert flatten(value) == {
        "items__0__id": 1,
        "items__0__name": "Apple",
        "items__1__id": 2,
        "items__1__name": "Orange",
        "tags__0": "a",
        "tags__1": "b",
    }


def test_flatten_key_order_is_pre_order() -> None:
    value = {"z": 1, "a": {"y": [True, None], "b": 2.5}, "m": "x"}
    assert list(flatten(value)) == ["z", "a__y__0", "a__y__1", "a__b", "m"]


def test_flatten_keeps_leaf_values_untouched() -> None:
    flat = flatten({"n": None, "t": True, "i": 3, "f": 1.5, "s": "00123"})
    assert flat == {"n": None, "t": True, "i": 3, "f": 1.5, "s": "00123"}
    assert flat["t"] is True
    assert flat["s"] == "00123"


def test_flatten_bare_scalar_uses_root_key() -> None:
    assert flatten("value") == {"": "value"}
    assert flatten(None) == {"": None}


def test_flatten_empty_containers_produce_no_entries() -> None:
    assert flatten({}) == {}
    assert flatten([]) == {}
    assert flatten({"a": {}, "b": [], "c": 1}) == {"c": 1}


def test_flatten_accepts_tuples_as_arrays() -> None:
    assert flatten({"point": (1, 2)}) == {"point__0": 1, "point__1": 2}


def test_flatten_with_custom_codec() -> None:
    assert flatten({"a": {"b": [1]}}, PathCodec(sep=".")) == {"a.b.0": 1}


def test_flatten_rejects_separator_in_key() -> None:
    with pytest.raises(PathConflict, match="must not contain separator"):
        _ = flatten({"a__b": 1})


def test_flatten_rejects_empty_key() -> None:
    with pytest.raises(PathConflict, match="path segments must not be empty"):
        _ = flatten({"": 1})


def test_flatten_rejects_non_string_keys() -> None:
    with pytest.raises(TypeError, match="object keys must be strings, got int"):
        _ = flatten({1: "x"})


def test_flatten_rejects_unsupported_values() -> None:
    with pytest.raises(TypeError, match="unsupported value of type set"):
        _ = flatten({"a": {1, 2}})


def test_flatten_then_unflatten_example() -> None:
    value = {
        "user": {"name": "John", "address": {"city": "NYC", "zip": "10001"}},
        "active": True,
    }
    assert unflatten(flatten(value)) == value


@given(value=_TREES)
def test_unflatten_inverts_flatten(value: object) -> None:
    assert unflatten(flatten(value)) == value
