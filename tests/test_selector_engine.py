"""
Tests for Selector dispatch: precedence, empty selectors and the id "all" path.
"""

import pytest

from soup_select import Selector, parse, select_all, select_first


class TestSelector:

    def test_defaults(self):
        selector = Selector()
        assert selector.id == ""
        assert selector.class_name == ""
        assert selector.tag == ""
        assert selector.recursive is False
        assert selector.mode is None

    @pytest.mark.parametrize("kwargs, mode", [
        ({"id": "x", "class_name": "c", "tag": "p"}, "id"),
        ({"class_name": "c", "tag": "p"}, "class"),
        ({"tag": "p"}, "tag"),
        ({"id": "", "class_name": "", "tag": "p"}, "tag"),
    ])
    def test_precedence(self, kwargs, mode):
        assert Selector(**kwargs).mode == mode

    def test_none_fields_count_as_unset(self):
        assert Selector(id=None, class_name=None, tag="p").mode == "tag"

    def test_equality_and_repr(self):
        assert Selector(tag="p", recursive=True) == Selector(tag="p", recursive=True)
        assert Selector(tag="p") != Selector(tag="p", recursive=True)
        assert "tag='p'" in repr(Selector(tag="p"))


class TestSelectFirst:

    def test_id_wins_over_class_and_tag(self, tree):
        selector = Selector(id="p1", class_name="c", tag="section")
        assert select_first(tree.root, selector) is tree.p1

    def test_class_wins_over_tag(self, tree):
        selector = Selector(class_name="c", tag="section", recursive=True)
        assert select_first(tree.root, selector) is tree.p2

    def test_tag(self, tree):
        assert select_first(tree.root, Selector(tag="section")) is tree.s1

    def test_recursive_flag(self, tree):
        assert select_first(tree.root, Selector(id="p3")) is None
        assert select_first(tree.root, Selector(id="p3", recursive=True)) is tree.p3

    def test_later_fields_ignored_on_miss(self, tree):
        # The id misses; the tag would have matched but is never tried
        selector = Selector(id="nope", tag="p", recursive=True)
        assert select_first(tree.root, selector) is None

    def test_empty_selector(self, tree):
        assert select_first(tree.root, Selector()) is None
        assert select_first(tree.root, Selector(recursive=True)) is None


class TestSelectAll:

    def test_id_hit_is_single_element_list(self, tree):
        assert select_all(tree.root, Selector(id="p1")) == [tree.p1]
        assert select_all(tree.root, Selector(id="p3", recursive=True)) == [tree.p3]

    def test_id_miss_is_empty_list(self, tree):
        assert select_all(tree.root, Selector(id="p3")) == []
        assert select_all(tree.root, Selector(id="nope", recursive=True)) == []

    def test_class_includes_start_node(self, tree):
        assert select_all(tree.s1, Selector(class_name="a")) == [tree.s1]
        assert select_all(tree.s1, Selector(class_name="a", recursive=True)) == [tree.s1, tree.inner]

    def test_class_miss_is_empty_list(self, tree):
        assert select_all(tree.root, Selector(class_name="zzz", recursive=True)) == []

    def test_tag_excludes_start_node(self, tree):
        assert select_all(tree.root, Selector(tag="div", recursive=True)) == [tree.inner]
        assert select_all(tree.root, Selector(tag="p")) == [tree.p1, tree.p4]

    def test_empty_selector(self, tree):
        assert select_all(tree.root, Selector()) == []

    def test_idempotent(self, tree):
        selector = Selector(tag="p", recursive=True)
        assert select_all(tree.doc, selector) == select_all(tree.doc, selector)


class TestParsedScenario:
    """The div/span/a example run through the real parser."""

    def test_scenario(self, scenario_html):
        doc = parse(scenario_html)
        div = select_first(doc, Selector(id="x", recursive=True))
        assert div is not None
        assert div.tag_name == "div"

        assert select_all(div, Selector(class_name="c")) == []
        matches = select_all(div, Selector(class_name="c", recursive=True))
        assert [node.tag_name for node in matches] == ["span", "a"]

        span, link = matches
        assert link.attr("href") == "/p"
        assert link.text_content() == "Go"
        assert span.text_content() == "Hi"

    def test_results_round_trip(self, scenario_html):
        doc = parse(scenario_html)
        for node in select_all(doc, Selector(tag="a", recursive=True)):
            assert node.attr("class") == "c"
            assert node.has_class("c")
            assert node.text_content() == "Go"
