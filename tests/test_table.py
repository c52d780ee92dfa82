"""Tests for dtab.table: Dentry and Dtab construction and rendering."""

import logging

import pytest

from dtab.config import DtabConfig
from dtab.errors import InvalidCharacter, NonAscii
from dtab.nametree import NEG, Leaf, alt, leaf, union, weighted, weighted_mul
from dtab.path.prefix import Prefix
from dtab.table import Dentry, Dtab, dentry, make_dentry, make_dtab


class TestDentry:
    def test_ice_cream_store(self) -> None:
        tree = alt(alt(alt(leaf("/smitten"), "/humphrys"), "/birite"), "/three-twins")
        entry = make_dentry(Prefix.parse("/iceCreamStore"), tree)
        assert str(entry) == "/iceCreamStore => /smitten | /humphrys | /birite | /three-twins;"

    def test_single_leaf(self) -> None:
        entry = make_dentry(Prefix.parse("/iceCreamStore"), "/smitten")
        assert entry.dst == Leaf("/smitten")
        assert entry.render() == "/iceCreamStore => /smitten;"

    def test_text_prefix_is_parsed(self) -> None:
        entry = make_dentry("/iceCreamStore", "/smitten")
        assert entry.prefix == Prefix.parse("/iceCreamStore")

    def test_invalid_text_prefix(self) -> None:
        with pytest.raises(InvalidCharacter):
            make_dentry("/ice cream", "/smitten")

    def test_sentinel_destinations(self) -> None:
        assert str(dentry("/iceCreamStore", NEG | "/smitten")) == "/iceCreamStore => ~ | /smitten;"
        assert str(dentry("/iceCreamStore", "!")) == "/iceCreamStore => !;"

    def test_weighted_union(self) -> None:
        entry = dentry("/iceCreamStore", weighted_mul(0.7, "/smitten") & weighted_mul(0.3, "/humphrys"))
        assert str(entry) == "/iceCreamStore => 0.7 * /smitten & 0.3 * /humphrys;"

    def test_default_weight_union(self) -> None:
        entry = dentry("/iceCreamStore", leaf("/smitten") & "/humphrys")
        assert str(entry) == "/iceCreamStore => 0.5 * /smitten & 0.5 * /humphrys;"

    def test_empty_prefix(self) -> None:
        assert str(dentry("/", "/a")) == " => /a;"

    def test_wildcard_prefix(self) -> None:
        assert str(dentry("/http/*/web", "/svc")) == "/http/*/web => /svc;"

    def test_type_checks(self) -> None:
        with pytest.raises(TypeError):
            Dentry("/a", Leaf("/b"))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Dentry(Prefix.parse("/a"), "/b")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        entry = dentry("/a", "/b")
        with pytest.raises(AttributeError):
            entry.dst = Leaf("/c")  # type: ignore[misc]


class TestDtab:
    def test_empty_renders_empty(self) -> None:
        assert str(Dtab()) == ""
        assert make_dtab([]).render() == ""

    def test_order_preserved(self) -> None:
        table = make_dtab(
            [
                dentry("/smitten", "/USA/CA/SF/Harrison/2790"),
                dentry("/iceCreamStore", leaf("/humphrys") | "/smitten"),
            ]
        )
        assert str(table) == (
            "/smitten => /USA/CA/SF/Harrison/2790;\n"
            "/iceCreamStore => /humphrys | /smitten;\n"
        )

    def test_reverse_order_preserved(self) -> None:
        a = dentry("/a", "/x")
        b = dentry("/b", "/y")
        assert str(make_dtab([b, a])) == "/b => /y;\n/a => /x;\n"

    def test_duplicates_kept(self) -> None:
        entry = dentry("/a", "/x")
        table = make_dtab([entry, entry, dentry("/a", "/y")])
        assert len(table) == 3
        assert str(table) == "/a => /x;\n/a => /x;\n/a => /y;\n"

    def test_from_pairs(self) -> None:
        table = Dtab.from_pairs(
            [
                ("/smitten", "/USA/CA/SF/Harrison/2790"),
                ("/iceCreamStore", leaf("/humphrys") | "/smitten"),
            ]
        )
        assert [str(e.prefix) for e in table] == ["/smitten", "/iceCreamStore"]

    def test_from_pairs_aborts_on_bad_prefix(self) -> None:
        with pytest.raises(NonAscii):
            Dtab.from_pairs([("/ok", "/a"), ("/crème", "/b")])

    def test_custom_line_terminator(self) -> None:
        table = make_dtab([dentry("/a", "/x"), dentry("/b", "/y")])
        assert table.render(DtabConfig(line_terminator="\r\n")) == "/a => /x;\r\n/b => /y;\r\n"

    def test_indexing(self) -> None:
        first = dentry("/a", "/x")
        second = dentry("/b", "/y")
        table = make_dtab([first, second])
        assert table[0] is first
        assert table[1:] == Dtab((second,))

    def test_add_dentry(self) -> None:
        base = make_dtab([dentry("/a", "/x")])
        extended = base + dentry("/b", "/y")
        assert len(base) == 1
        assert str(extended) == "/a => /x;\n/b => /y;\n"

    def test_add_dtab(self) -> None:
        left = make_dtab([dentry("/a", "/x")])
        right = make_dtab([dentry("/b", "/y")])
        assert (left + right).dentries == left.dentries + right.dentries

    def test_add_unsupported(self) -> None:
        with pytest.raises(TypeError):
            make_dtab([]) + "/a => /b;"  # type: ignore[operator]

    def test_rejects_non_dentry(self) -> None:
        with pytest.raises(TypeError):
            Dtab(("/a => /b;",))  # type: ignore[arg-type]

    def test_make_dtab_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="dtab.table"):
            make_dtab([dentry("/a", "/x")])
        assert "Built dtab with 1 dentries" in caplog.text


class TestEndToEnd:
    def test_mixed_table(self) -> None:
        split = union(weighted(leaf("/srv/v1"), 0.9), weighted(leaf("/srv/v2"), 0.1))
        table = (
            make_dtab([dentry("/http/1.1/*", "/svc")])
            + (Prefix.parse("/svc/web") >> (split | "~"))
            + dentry("/svc", "/$/inet/127.1/8080")
        )
        assert table.render() == (
            "/http/1.1/* => /svc;\n"
            "/svc/web => 0.9 * /srv/v1 & 0.1 * /srv/v2 | ~;\n"
            "/svc => /$/inet/127.1/8080;\n"
        )
