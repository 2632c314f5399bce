from jinja2 import Environment, PackageLoader, TemplateError

from .errors import RenderError
from .model import Ontology

TEMPLATE_NAME = "ontology.dot"

def _environment(escape: bool) -> Environment:
    return Environment(
        loader=PackageLoader("onto2dot"),
        autoescape=escape,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

def render(ontology: Ontology, escape: bool = False) -> str:
    """Render ``ontology`` as a Graphviz digraph.

    Labels are written verbatim unless ``escape`` is set, in which case
    markup characters are entity-encoded.
    """
    try:
        template = _environment(escape).get_template(TEMPLATE_NAME)
        return template.render(classes=ontology.classes, links=ontology.links)
    except TemplateError as e:
        raise RenderError(f"cannot render {TEMPLATE_NAME}: {e}") from e
