"""
Tests for attr, has_class and text_content.
"""

from soup_select import Document, attr, has_class, text_content


def _element(*attributes, tag="div"):
    return Document().create_element(tag, attributes)


class TestAttr:
    """attr returns the first matching value or an empty string."""

    def test_present(self, tree):
        assert attr(tree.p1, "id") == "p1"
        assert attr(tree.p1, "class") == "a b"

    def test_missing_is_empty_string(self, tree):
        assert attr(tree.p1, "href") == ""

    def test_non_element_has_no_attributes(self, tree):
        assert attr(tree.lead, "id") == ""
        assert attr(tree.note, "id") == ""
        assert attr(tree.doc, "id") == ""

    def test_first_duplicate_wins(self):
        element = _element(("data-x", "1"), ("data-x", "2"))
        assert attr(element, "data-x") == "1"

    def test_name_is_case_sensitive(self):
        element = _element(("viewBox", "0 0 1 1"))
        assert attr(element, "viewBox") == "0 0 1 1"
        assert attr(element, "viewbox") == ""

    def test_empty_value(self):
        element = _element(("disabled", ""))
        assert attr(element, "disabled") == ""
        assert element.has_attribute("disabled")


class TestHasClass:
    """has_class compares whole space-separated tokens."""

    def test_token_match(self, tree):
        assert has_class(tree.p1, "a")
        assert has_class(tree.p1, "b")

    def test_no_substring_match(self, tree):
        assert not has_class(tree.p4, "a")
        assert has_class(tree.p4, "ab")

    def test_case_sensitive(self, tree):
        assert not has_class(tree.p1, "A")

    def test_without_class_attribute(self, tree):
        assert not has_class(tree.p3, "a")
        assert not has_class(tree.lead, "a")

    def test_only_first_class_attribute_counts(self):
        element = _element(("class", "x"), ("class", "y"))
        assert has_class(element, "x")
        assert not has_class(element, "y")

    def test_split_on_single_spaces_only(self):
        element = _element(("class", "a\tb"))
        assert not has_class(element, "a")
        assert has_class(element, "a\tb")

    def test_empty_token_from_double_space(self):
        assert has_class(_element(("class", "a  b")), "")
        assert not has_class(_element(("class", "a b")), "")

    def test_agrees_with_attr_split(self, tree):
        for node in (tree.root, tree.p1, tree.s1, tree.p2, tree.p3, tree.p4):
            for token in ("a", "b", "c", "ab", "box"):
                assert has_class(node, token) == (token in attr(node, "class").split(" "))


class TestTextContent:
    """text_content reads the node itself or its first text child."""

    def test_text_node_is_trimmed(self, tree):
        assert text_content(tree.lead) == "Hello"

    def test_first_text_child(self, tree):
        assert text_content(tree.root) == "Hello"
        assert text_content(tree.p1) == "one"

    def test_no_text_child(self, tree):
        assert text_content(tree.s1) == ""
        assert text_content(tree.doc) == ""

    def test_does_not_descend(self):
        doc = Document()
        li = doc.create_element("li")
        bold = li.append_child(doc.create_element("b"))
        bold.append_child(doc.create_text_node("bold"))
        assert text_content(li) == ""

    def test_skips_element_children_to_first_text_child(self):
        doc = Document()
        li = doc.create_element("li")
        bold = li.append_child(doc.create_element("b"))
        bold.append_child(doc.create_text_node("bold"))
        li.append_child(doc.create_text_node(" tail\n"))
        assert text_content(li) == "tail"

    def test_only_first_text_child(self):
        doc = Document()
        p = doc.create_element("p")
        p.append_child(doc.create_text_node(" \r\n\t"))
        p.append_child(doc.create_element("br"))
        p.append_child(doc.create_text_node("after"))
        assert text_content(p) == ""

    def test_comment_is_not_text(self):
        doc = Document()
        p = doc.create_element("p")
        p.append_child(doc.create_comment("hidden"))
        p.append_child(doc.create_text_node("shown"))
        assert text_content(p) == "shown"

    def test_other_whitespace_is_kept(self):
        doc = Document()
        text = doc.create_text_node("\xa0x\f")
        assert text_content(text) == "\xa0x\f"
