"""
Shared fixtures: a hand-built tree so traversal tests don't depend on the parser.

    div#root.box
      "\\n  Hello  "
      p#p1.a.b            "one"
      <!-- note -->
      section#s1.a
        p#p2.c            "two"
        div#inner.a
          p#p3            "three"
      p#p4.ab             "four"
"""

from types import SimpleNamespace

import pytest

from soup_select import Document


def _add(document, parent, tag, text=None, **attrs):
    attributes = [("class" if name == "class_" else name, value) for name, value in attrs.items()]
    element = document.create_element(tag, attributes)
    parent.append_child(element)
    if text is not None:
        element.append_child(document.create_text_node(text))
    return element


@pytest.fixture
def tree():
    doc = Document()
    root = _add(doc, doc, "div", id="root", class_="box")
    lead = root.append_child(doc.create_text_node("\n  Hello  "))
    p1 = _add(doc, root, "p", "one", id="p1", class_="a b")
    note = root.append_child(doc.create_comment("note"))
    s1 = _add(doc, root, "section", id="s1", class_="a")
    p2 = _add(doc, s1, "p", "two", id="p2", class_="c")
    inner = _add(doc, s1, "div", id="inner", class_="a")
    p3 = _add(doc, inner, "p", "three", id="p3")
    p4 = _add(doc, root, "p", "four", id="p4", class_="ab")
    return SimpleNamespace(doc=doc, root=root, lead=lead, p1=p1, note=note, s1=s1,
                           p2=p2, inner=inner, p3=p3, p4=p4)


@pytest.fixture
def scenario_html():
    return '<div id="x"><span class="c">Hi</span><a class="c" href="/p">Go</a></div>'
