from pathlib import Path

import pytest
from rdflib import Literal, Namespace
from rdflib.namespace import RDF, RDFS

DATA_DIR = Path(__file__).parent / "data"

EX = Namespace("http://example.org/people#")


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def people_statements():
    """Person --owns--> Car, Person has an age, labels in Norwegian."""
    return [
        (EX.Person, RDF.type, RDFS.Class),
        (EX.Person, RDFS.label, Literal("Person", lang="no")),
        (EX.Car, RDF.type, RDFS.Class),
        (EX.Car, RDFS.label, Literal("Car", lang="no")),
        (EX.owns, RDF.type, RDF.Property),
        (EX.owns, RDFS.label, Literal("owns", lang="no")),
        (EX.owns, RDFS.domain, EX.Person),
        (EX.owns, RDFS.range, EX.Car),
        (EX.age, RDF.type, RDF.Property),
        (EX.age, RDFS.label, Literal("age", lang="no")),
        (EX.age, RDFS.domain, EX.Person),
    ]
