import io

from pslister.strtable import StringTable


def test_add_deduplicates():
    table = StringTable()
    table.add("b")
    table.add("a")
    table.add("b")
    assert len(table) == 2


def test_get_present_and_missing():
    table = StringTable()
    table.add("key")
    assert table.get("key") == "key"
    assert table.get("other") is None


def test_contains():
    table = StringTable()
    table.add("x")
    assert "x" in table
    assert "y" not in table


def test_dump_sorted_is_sorted():
    table = StringTable()
    for word in ["pear", "apple", "fig", "apple"]:
        table.add(word)
    dumped = table.dump_sorted()
    assert dumped == sorted(set(["pear", "apple", "fig"]))


def test_self_print():
    table = StringTable()
    table.add("b")
    table.add("a")
    out = io.StringIO()
    table.self_print(out)
    assert out.getvalue() == "a\nb\n\n"


def test_self_print_empty():
    out = io.StringIO()
    StringTable().self_print(out)
    assert out.getvalue() == "\n"