import pytest

from wideriver.identitytable import IdentityTable


class Key:
    def __init__(self, label):
        self.label = label

    def __eq__(self, other):
        return isinstance(other, Key) and other.label == self.label

    def __hash__(self):
        return hash(self.label)


def test_zero_sizes_rejected():
    with pytest.raises(ValueError):
        IdentityTable(0, 1)
    with pytest.raises(ValueError):
        IdentityTable(1, 0)


def test_equal_but_distinct_keys_are_separate_entries():
    table = IdentityTable(2, 2)
    a, b = Key("k"), Key("k")
    assert a == b
    table.put(a, "first")
    table.put(b, "second")
    assert len(table) == 2
    assert table.get(a) == "first"
    assert table.get(b) == "second"
    assert table.get(Key("k")) is None


def test_put_overwrites_and_returns_previous():
    table = IdentityTable(1, 1)
    key = Key("x")
    assert table.put(key, "one") is None
    assert table.put(key, "two") == "one"
    assert table.get(key) == "two"
    assert len(table) == 1


def test_remove_keeps_order():
    table = IdentityTable(4, 4)
    keys = [Key(n) for n in "abc"]
    for key in keys:
        table.put(key, key.label)
    assert table.remove(keys[1]) == "b"
    assert table.remove(keys[1]) is None
    assert table.keys()[0] is keys[0]
    assert table.keys()[1] is keys[2]
    assert table.values() == ["a", "c"]


def test_none_key_and_none_value():
    table = IdentityTable(1, 1)
    table.put(None, "nothing")
    key = Key("v")
    table.put(key, None)
    assert table.get(None) == "nothing"
    assert table.get(key) is None
    assert len(table) == 2


def test_capacity_grows_in_steps():
    table = IdentityTable(2, 3)
    keys = [Key(i) for i in range(3)]
    for key in keys[:2]:
        table.put(key, 1)
    assert table.capacity() == 2
    table.put(keys[2], 1)
    assert table.capacity() == 2 + 3


def test_equal_compares_keys_by_identity():
    a, b = IdentityTable(1, 1), IdentityTable(1, 1)
    key, value = Key("k"), object()
    a.put(key, value)
    b.put(key, value)
    assert a.equal(b)
    c = IdentityTable(1, 1)
    c.put(Key("k"), value)
    assert not a.equal(c)
    assert not a.equal(None)


def test_equal_with_value_comparison():
    a, b = IdentityTable(1, 1), IdentityTable(1, 1)
    key = Key("k")
    a.put(key, "v")
    b.put(key, "".join(["v"]))
    assert a.equal(b, lambda x, y: x == y)


def test_str_lines():
    table = IdentityTable(2, 2)
    first, second = Key("a"), Key("b")
    table.put(first, "value")
    table.put(second, None)
    lines = str(table).split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("0x")
    assert lines[0].endswith(" = value")
    assert lines[1].endswith(" = (null)")
    assert str(IdentityTable(1, 1)) == ""