import pytest

from reflex.args import (
    Kwargs,
    Pack,
    forward_as_pack,
    get,
    get_if,
    make_kwargs,
    parse_integral,
    parse_name,
    select,
)


def test_pack_basics():
    p = Pack(1, "a", 2.5)
    assert len(p) == 3
    assert list(p) == [1, "a", 2.5]
    assert p[1] == "a"
    assert p[1:] == Pack("a", 2.5)


def test_pack_get_single_and_many():
    p = Pack(1, "a", 2.5)
    assert p.get(0) == 1
    assert p.get(2, 0) == (2.5, 1)


def test_pack_get_without_index_rejected():
    with pytest.raises(TypeError):
        Pack(1).get()


def test_pack_get_out_of_range():
    with pytest.raises(IndexError):
        Pack(1, 2).get(5)


def test_selector_by_type():
    p = Pack(1, "a", 2.5, 3)
    idx = p.selector(int)
    assert idx == (0, 3)
    assert all(isinstance(p[i], int) for i in idx)


def test_selector_by_predicate():
    p = Pack(1, "a", 2.5, "b")
    idx = p.selector(lambda t: t is str)
    assert all(isinstance(p[i], str) for i in idx)
    assert len(idx) == 2


def test_get_if():
    p = Pack(1, "a", 2.5, "b")
    assert p.get_if(str) == ("a", "b")
    assert p.get_if((int, float)) == (1, 2.5)


def test_select_indexes_partition():
    p = Pack(1, "a", 2.5, "b", 3)
    *groups, rest = p.select_indexes(int, str)
    covered = sorted([*groups[0], *groups[1], *rest])
    assert covered == list(range(len(p)))
    assert all(not isinstance(p[i], (int, str)) for i in rest)


def test_select_packs():
    p = Pack(1, "a", 2.5, "b", 3)
    ints, strs, rest = p.select(int, str)
    assert ints == Pack(1, 3)
    assert strs == Pack("a", "b")
    assert rest == Pack(2.5)


def test_module_level_helpers():
    p = forward_as_pack(1, "a", 2.5)
    assert get(1, p) == "a"
    assert get_if(float, p) == (2.5,)
    assert select(p, str) == (Pack("a"), Pack(1, 2.5))


def test_helpers_require_pack():
    with pytest.raises(TypeError):
        get(0, (1, 2))
    with pytest.raises(TypeError):
        get_if(int, [1])
    with pytest.raises(TypeError):
        select((1,), int)


@pytest.mark.parametrize(
    "raw, expected",
    [(" = b", "b"), ("a=3", "a"), ("  name", "name"), ("", ""), ("x", "x")],
)
def test_parse_name(raw, expected):
    assert parse_name(raw) == expected


def test_make_kwargs():
    k = make_kwargs("a, b = 2", 1, 2)
    assert k.a == 1
    assert k["b"] == 2
    assert dict(k) == {"a": 1, "b": 2}
    assert k == Kwargs(a=1, b=2)


def test_kwargs_missing_attribute():
    k = Kwargs(a=1)
    assert k.a == 1
    assert k["a"] == 1
    with pytest.raises(AttributeError):
        _ = k.b
    with pytest.raises(KeyError):
        _ = k["b"]


def test_make_kwargs_too_few_names():
    with pytest.raises(ValueError):
        make_kwargs("a", 1, 2)


def test_make_kwargs_duplicate_names():
    with pytest.raises(ValueError):
        make_kwargs("a, a", 1, 2)


def test_parse_integral():
    assert parse_integral("0042") == 42
    assert parse_integral("") == 0
    assert parse_integral("000") == 0


@pytest.mark.parametrize("text", ["12a", "-3", "1_000", " 1"])
def test_parse_integral_rejects_non_digits(text):
    with pytest.raises(ValueError):
        parse_integral(text)