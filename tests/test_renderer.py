"""
Tests for the DOT rendering of an extracted ontology.
"""

from onto2dot.model import Link, Ontology, OntologyClass
from onto2dot.renderer import render

ATTRIBUTE_ROW = "<TR><TD ALIGN='LEFT'><B>{}</B><BR ALIGN='LEFT'/></TD></TR>"


def _people():
    return Ontology(
        classes=[
            OntologyClass(uri="http://example.org/Person", label="Person", attributes=["age", "name"]),
            OntologyClass(uri="http://example.org/Car", label="Car"),
        ],
        links=[Link("Person", "Car", "owns")],
    )


def test_digraph_shape():
    dot = render(_people())

    assert dot.startswith("digraph Ontology {\n\tnode [shape=plaintext];\n")
    assert dot.endswith("}\n")
    assert "\t\"Person\"[label=<<TABLE BORDER='0' CELLBORDER='1' CELLSPACING='0' CELLPADDING='5'>" in dot
    assert "<FONT POINT-SIZE='12' FACE='monospace'>Car</FONT>" in dot
    assert '\t"Person"->"Car"[label=<<B>owns</B>>];\n' in dot


def test_one_row_per_attribute_in_order():
    dot = render(_people())

    age = dot.index(ATTRIBUTE_ROW.format("age"))
    name = dot.index(ATTRIBUTE_ROW.format("name"))
    assert age < name
    assert dot.count("<TR><TD ALIGN='LEFT'><B>") == 2
    assert dot.count("</TABLE>>];") == 2


def test_empty_ontology():
    dot = render(Ontology())
    assert "TABLE" not in dot
    assert "->" not in dot
    assert dot.strip().endswith("}")


def test_empty_label_is_rendered_as_empty_node_name():
    ontology = Ontology(classes=[OntologyClass(uri="http://example.org/X")],
                        links=[Link("", "", "")])
    dot = render(ontology)
    assert '\t""[label=<' in dot
    assert '""->""[label=<<B></B>>];' in dot


def test_rendering_is_deterministic():
    assert render(_people()) == render(_people())


def test_labels_are_verbatim_by_default():
    ontology = Ontology(classes=[OntologyClass(uri="x", label="A<B>", attributes=["x & y"])])
    dot = render(ontology)
    assert '"A<B>"[label=' in dot
    assert ATTRIBUTE_ROW.format("x & y") in dot


def test_escape_encodes_markup():
    ontology = Ontology(
        classes=[OntologyClass(uri="x", label="A<B>", attributes=["x & y"])],
        links=[Link("A<B>", 'say "hi"', "r")],
    )
    dot = render(ontology, escape=True)
    assert '"A&lt;B&gt;"[label=' in dot
    assert ATTRIBUTE_ROW.format("x &amp; y") in dot
    assert '->"say &#34;hi&#34;"' in dot
