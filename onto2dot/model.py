from dataclasses import dataclass, field
from typing import List

@dataclass
class OntologyClass:
    uri: str
    label: str = ""
    attributes: List[str] = field(default_factory=list) # Labels of literal-valued properties

@dataclass
class Property:
    uri: str
    label: str = ""
    domains: List[str] = field(default_factory=list)
    ranges: List[str] = field(default_factory=list) # Only ranges that are known classes

    @property
    def is_relation(self) -> bool:
        return bool(self.ranges)

@dataclass(frozen=True)
class Link:
    from_label: str
    to_label: str
    label: str

@dataclass
class Ontology:
    classes: List[OntologyClass] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)
    missing_labels: List[str] = field(default_factory=list) # URIs with no label in the preferred language
