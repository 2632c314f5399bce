import logging
import click
from .errors import Onto2DotError, RenderError
from .extractor import DEFAULT_LANGUAGE, extract
from .parser import OntologyParser
from .renderer import render
from .vocabulary import OWL_VOCABULARY, RDFS_VOCABULARY

class ClickEchoHandler(logging.Handler):
    """Send log records to stderr the way the rest of the CLI talks."""

    def emit(self, record):
        try:
            click.echo(f"onto2dot: {self.format(record)}", err=True)
        except Exception:
            self.handleError(record)

def configure_logging(quiet: bool):
    logger = logging.getLogger("onto2dot")
    for handler in list(logger.handlers):
        if isinstance(handler, ClickEchoHandler):
            logger.removeHandler(handler)
    logger.addHandler(ClickEchoHandler())
    logger.setLevel(logging.ERROR if quiet else logging.INFO)

@click.command(context_settings={'auto_envvar_prefix': 'ONTO2DOT'})
@click.option('--in', 'input_path', required=True, type=str,
              help='Ontology file (RDF, turtle by default).')
@click.option('--lang', default=DEFAULT_LANGUAGE, show_default=True,
              help='Prefer labels with this language tag ("" for untagged labels).')
@click.option('--format', 'rdf_format', default=None,
              help='rdflib parser to use. Guessed from the file extension when omitted.')
@click.option('--owl', is_flag=True, help='Also treat owl:Class and OWL properties as declarations.')
@click.option('--escape', is_flag=True, help='Entity-encode markup characters in labels.')
@click.option('--output', '-o', type=click.File('w'), default='-', help='Output file, stdout by default.')
@click.option('--quiet', '-q', is_flag=True, help='Do not report missing labels.')
def main(input_path, lang, rdf_format, owl, escape, output, quiet):
    """Render an RDF Schema ontology as a Graphviz digraph."""
    configure_logging(quiet)
    vocabulary = OWL_VOCABULARY if owl else RDFS_VOCABULARY

    # Rendered in full before writing, a failure leaves no partial graph
    try:
        parser = OntologyParser(input_path, format=rdf_format)
        ontology = extract(parser.statements(), preferred_language=lang, vocabulary=vocabulary)
        dot = render(ontology, escape=escape)
        try:
            output.write(dot)
            output.flush()
        except OSError as e:
            raise RenderError(f"cannot write output: {e}") from e
    except Onto2DotError as e:
        raise click.ClickException(str(e)) from e

if __name__ == '__main__':
    main()
