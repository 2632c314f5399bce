import rdflib
from rdflib.util import guess_format

from .errors import SourceReadError

DEFAULT_FORMAT = "turtle"

class OntologyParser:
    def __init__(self, source_path: str, format: str = None):
        self.source_path = source_path
        self.format = format or guess_format(source_path) or DEFAULT_FORMAT
        self.graph = rdflib.Graph()
        try:
            self.graph.parse(source_path, format=self.format)
        except Exception as e:
            # rdflib plugins raise their own error types (BadSyntax, SAXParseException, PluginException...)
            raise SourceReadError(source_path, e) from e

    def statements(self) -> list:
        """All triples of the document, in a stable order.

        A graph is a set, so triples are sorted by their N3 form to keep
        runs over the same file identical.
        """
        return sorted(self.graph, key=lambda triple: tuple(term.n3() for term in triple))

    def __len__(self):
        return len(self.graph)
