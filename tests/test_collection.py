"""Tests for the iteration kernel."""

import pytest

import underbar as ub


def test_each_sequence_passes_value_index_and_collection() -> None:
    """Test each on a list visits in index order with the original list."""
    data = ["a", "b", "c"]
    seen: list[tuple[str, int, object]] = []
    ub.each(data, lambda value, index, coll: seen.append((value, index, coll)))
    assert seen == [("a", 0, data), ("b", 1, data), ("c", 2, data)]
    assert all(entry[2] is data for entry in seen)


def test_each_mapping_passes_keys() -> None:
    """Test each on a dict visits values with their keys, in insertion order."""
    data = {"z": 1, "a": 2}
    seen: list[tuple[int, str]] = []
    ub.each(data, lambda value, key: seen.append((value, key)))
    assert seen == [(1, "z"), (2, "a")]


def test_each_trims_arguments_to_iterator_arity() -> None:
    """Test one-argument and zero-argument callbacks are accepted."""
    values: list[int] = []
    ub.each((1, 2), values.append)
    assert values == [1, 2]

    counter: list[None] = []
    ub.each([1, 2, 3], lambda: counter.append(None))
    assert len(counter) == 3


def test_each_accepts_builtin_types() -> None:
    """Test builtins without a readable signature are called with the value."""
    ub.each(["1", "2"], int)
    ub.each([1.5], str)
    assert ub.map(["1", "2"], int) == [1, 2]


def test_each_unreadable_signature_gets_all_arguments() -> None:
    """Test a callable that takes three arguments still receives them."""
    seen: list[tuple[object, ...]] = []

    class Sink:
        __signature__ = "unreadable"

        def __call__(self, *args: object) -> None:
            seen.append(args)

    ub.each(["x"], Sink())
    assert seen == [("x", 0, ["x"])]


def test_each_ignores_iterator_return_value() -> None:
    """Test each always returns None."""
    assert ub.each([1, 2], lambda x: x * 2) is None


def test_each_on_empty_collections() -> None:
    """Test empty sequences and mappings never call the iterator."""
    calls: list[object] = []
    ub.each([], calls.append)
    ub.each({}, calls.append)
    assert calls == []


def test_each_rejects_non_callable() -> None:
    """Test a non-callable iterator is a contract violation."""
    with pytest.raises(ub.ContractError, match="iterator must be callable"):
        ub.each([1], 42)  # type: ignore[arg-type]


@pytest.mark.parametrize("bad", ["abc", b"abc", 12, None])
def test_as_collection_rejects_strings_and_scalars(bad: object) -> None:
    """Test strings, bytes and scalars are not collections."""
    with pytest.raises(ub.ContractError, match="expected a sequence or a mapping"):
        ub.as_collection(bad)


def test_as_collection_dispatch() -> None:
    """Test each shape lands in its own variant."""
    assert isinstance(ub.as_collection([1]), ub.OrderedSequence)
    assert isinstance(ub.as_collection((1,)), ub.OrderedSequence)
    assert isinstance(ub.as_collection({"a": 1}), ub.KeyedMapping)
    assert isinstance(ub.as_collection({1, 2}), ub.OrderedSequence)


def test_as_collection_is_idempotent() -> None:
    """Test wrapping an already wrapped collection returns it unchanged."""
    wrapped = ub.as_collection([1, 2])
    assert ub.as_collection(wrapped) is wrapped


def test_as_collection_materialises_generators() -> None:
    """Test generators are consumed once into a tuple."""
    wrapped = ub.as_collection(x for x in range(3))
    assert wrapped.inner() == (0, 1, 2)
    assert list(wrapped) == [0, 1, 2]


def test_collection_keys_and_len() -> None:
    """Test keys and len on both variants."""
    seq = ub.as_collection(["x", "y"])
    mapping = ub.as_collection({"k": 1, "j": 2})
    assert seq.keys() == [0, 1]
    assert mapping.keys() == ["k", "j"]
    assert len(seq) == 2
    assert len(mapping) == 2
    assert list(mapping) == [1, 2]


def test_collection_repr() -> None:
    """Test reprs show the wrapped data."""
    assert repr(ub.as_collection([1, "a"])) == "OrderedSequence(1, 'a')"
    assert repr(ub.as_collection({"a": 1})) == "KeyedMapping({'a': 1})"


def test_into_and_inspect() -> None:
    """Test the pipe helpers shared by every wrapper."""
    seen: list[object] = []
    wrapped = ub.as_collection([1, 2, 3])
    assert wrapped.inspect(seen.append) is wrapped
    assert seen == [wrapped]
    assert wrapped.into(ub.reduce, lambda acc, x: acc + x) == 6


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:
    """Test the wrappers and timing helpers carry no instance dict."""
    assert _check_slots(ub.as_collection([]))
    assert _check_slots(ub.as_collection({}))
    assert _check_slots(ub.ManualScheduler())
    assert _check_slots(ub.ThreadScheduler())
    assert _check_slots(ub.AsyncioScheduler())
    assert _check_slots(ub.get_config())
