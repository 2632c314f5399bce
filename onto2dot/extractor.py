"""Turn a sequence of RDF statements into classes and links.

Statements are indexed in one pass and resolved in a second one, so the
result does not depend on statements about a class or property appearing
next to its type declaration.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from rdflib import Literal, URIRef
from rdflib.term import Node

from .model import Link, Ontology, OntologyClass, Property
from .vocabulary import RDFS_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "no"

Statement = Tuple[Node, Node, Node]


def _language(literal: Literal) -> str:
    return literal.language or ""


class _Index:
    """Everything the extractor needs, keyed by resource."""

    def __init__(self, preferred_language: str, vocabulary: Vocabulary):
        self.preferred_language = preferred_language
        self.vocabulary = vocabulary
        self.declared_classes: Dict[URIRef, None] = {}
        self.declared_properties: Dict[URIRef, None] = {}
        # class -> properties having it as domain, dicts used as ordered sets
        self.classes: Dict[URIRef, Dict[URIRef, None]] = {}
        self.ranges: Dict[URIRef, Dict[URIRef, None]] = {}
        self.label_candidates: Dict[URIRef, str] = {}

    def add(self, statement: Statement):
        subject, predicate, obj = statement
        if not isinstance(subject, URIRef):
            return
        vocab = self.vocabulary

        if predicate == vocab.type:
            if obj in vocab.class_types:
                self.declared_classes.setdefault(subject)
                self.classes.setdefault(subject, {})
            if obj in vocab.property_types:
                self.declared_properties.setdefault(subject)
        elif predicate == vocab.label:
            if isinstance(obj, Literal) and _language(obj) == self.preferred_language:
                # First match wins
                self.label_candidates.setdefault(subject, str(obj))
        elif predicate == vocab.domain:
            if isinstance(obj, URIRef):
                self.classes.setdefault(obj, {}).setdefault(subject)
        elif predicate == vocab.range:
            if isinstance(obj, URIRef):
                self.ranges.setdefault(subject, {}).setdefault(obj)

    def label(self, uri: URIRef) -> Optional[str]:
        # Only declared classes and properties get a display name
        if uri in self.declared_classes or uri in self.declared_properties:
            return self.label_candidates.get(uri)
        return None

    def known_ranges(self, prop: URIRef) -> List[URIRef]:
        return [obj for obj in self.ranges.get(prop, {}) if obj in self.classes]


class _Labels:
    """Resolved labels, reporting each unresolved resource once."""

    def __init__(self, index: _Index):
        self.index = index
        self.missing: Dict[URIRef, None] = {}

    def __call__(self, uri: URIRef) -> str:
        label = self.index.label(uri)
        if label is None:
            if uri not in self.missing:
                self.missing[uri] = None
                logger.warning("missing @%s label for %s", self.index.preferred_language, uri)
            return ""
        return label


def extract(statements: Iterable[Statement],
            preferred_language: str = DEFAULT_LANGUAGE,
            vocabulary: Vocabulary = RDFS_VOCABULARY) -> Ontology:
    """Build the :class:`Ontology` described by ``statements``.

    A property whose range contains at least one known class becomes a
    :class:`Link` from each of its domain classes to each such range class.
    Any other property becomes an attribute row on each of its domain
    classes, or is dropped when its label does not resolve.

    Classes are the resources typed with one of ``vocabulary.class_types``
    plus every object of a domain statement. Labels are picked from label
    literals tagged with ``preferred_language`` (``""`` selects untagged
    literals); unresolved labels are logged and rendered as empty strings.
    """
    index = _Index(preferred_language, vocabulary)
    for statement in statements:
        index.add(statement)

    label_of = _Labels(index)
    ontology = Ontology()
    properties: Dict[URIRef, Property] = {}

    for class_uri, props in index.classes.items():
        cls = OntologyClass(uri=str(class_uri), label=label_of(class_uri))
        for prop_uri in props:
            prop = properties.get(prop_uri)
            if prop is None:
                prop = Property(
                    uri=str(prop_uri),
                    label=index.label(prop_uri) or "",
                    ranges=[str(r) for r in index.known_ranges(prop_uri)],
                )
                properties[prop_uri] = prop
            prop.domains.append(str(class_uri))

            if prop.is_relation:
                for range_uri in prop.ranges:
                    ontology.links.append(Link(
                        from_label=cls.label,
                        to_label=label_of(URIRef(range_uri)),
                        label=label_of(prop_uri),
                    ))
            else:
                label = label_of(prop_uri)
                if label:
                    cls.attributes.append(label)
        ontology.classes.append(cls)

    ontology.properties = list(properties.values())
    ontology.missing_labels = [str(uri) for uri in label_of.missing]
    return ontology
