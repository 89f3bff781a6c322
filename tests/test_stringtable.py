import pytest

from wideriver.stringtable import StringTable


def test_zero_sizes_rejected():
    with pytest.raises(ValueError):
        StringTable(0, 1, False)


def test_case_sensitive_keys_differ():
    table = StringTable(2, 2, False)
    table.put("Key", 1)
    table.put("key", 2)
    assert len(table) == 2
    assert table.get("Key") == 1
    assert table.get("key") == 2
    assert table.get("KEY") is None


def test_case_insensitive_keys_merge_and_keep_first_spelling():
    table = StringTable(2, 2, True)
    assert table.put("Key", 1) is None
    assert table.put("KEY", 2) == 1
    assert len(table) == 1
    assert table.get("key") == 2
    assert table.keys() == ["Key"]


def test_case_folding_is_ascii_only():
    table = StringTable(2, 2, True)
    table.put("\u00c9", 1)
    assert table.get("\u00e9") is None


def test_none_key_ignored():
    table = StringTable(1, 1, False)
    assert table.put(None, "v") is None
    assert len(table) == 0
    assert table.get(None) is None
    assert table.remove(None) is None


def test_remove_keeps_order():
    table = StringTable(1, 1, True)
    for name in ["a", "b", "c"]:
        table.put(name, name.upper())
    assert table.remove("B") == "B"
    assert table.keys() == ["a", "c"]
    assert table.values() == ["A", "C"]
    assert table.remove("b") is None


def test_capacity_grows_in_steps():
    table = StringTable(1, 2, False)
    table.put("a", 1)
    assert table.capacity() == 1
    table.put("b", 1)
    assert table.capacity() == 1 + 2


def test_equal_ignores_case_when_either_table_does():
    value = object()
    sensitive = StringTable(1, 1, False)
    insensitive = StringTable(1, 1, True)
    sensitive.put("Name", value)
    insensitive.put("name", value)
    assert sensitive.equal(insensitive)
    assert insensitive.equal(sensitive)
    other = StringTable(1, 1, False)
    other.put("name", value)
    assert not sensitive.equal(other)


def test_equal_values():
    a, b = StringTable(1, 1, False), StringTable(1, 1, False)
    a.put("k", [1])
    b.put("k", [1])
    assert not a.equal(b)
    assert a.equal(b, lambda x, y: x == y)
    assert not a.equal(None)


def test_str_lines():
    table = StringTable(2, 2, False)
    table.put("a", "1")
    table.put("b", None)
    assert str(table) == "a = 1\nb = (null)"
    assert str(StringTable(1, 1, False)) == ""


def test_non_string_key_rejected():
    table = StringTable(1, 1, False)
    with pytest.raises(TypeError):
        table.put(5, "v")