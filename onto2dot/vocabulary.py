from dataclasses import dataclass
from typing import FrozenSet

from rdflib import URIRef
from rdflib.namespace import OWL, RDF, RDFS

# Not part of the RDFS namespace, but what many hand-written schemas use
RDFS_PROPERTY = URIRef(str(RDFS) + "Property")

@dataclass(frozen=True)
class Vocabulary:
    """RDF terms the extractor reacts to."""
    class_types: FrozenSet[URIRef]
    property_types: FrozenSet[URIRef]
    type: URIRef = RDF.type
    label: URIRef = RDFS.label
    domain: URIRef = RDFS.domain
    range: URIRef = RDFS.range

RDFS_VOCABULARY = Vocabulary(
    class_types=frozenset([RDFS.Class]),
    property_types=frozenset([RDF.Property, RDFS_PROPERTY]),
)

OWL_VOCABULARY = Vocabulary(
    class_types=RDFS_VOCABULARY.class_types | {OWL.Class},
    property_types=RDFS_VOCABULARY.property_types | {OWL.ObjectProperty, OWL.DatatypeProperty},
)
