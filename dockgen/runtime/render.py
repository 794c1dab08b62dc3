"""Template renderer: turns a Dockerfile template and parameters into bytes.

The template is parsed on every call. Parameters missing from the mapping
render as empty strings, never as the literal placeholder.
"""

import logging
from collections.abc import Mapping

from jinja2 import Environment, TemplateError, TemplateSyntaxError, Undefined

from dockgen.runtime.errors import TemplateExecutionError, TemplateInvalidError

logger = logging.getLogger(__name__)


def _environment() -> Environment:
    # Dockerfiles are not markup; keep text byte-for-byte.
    return Environment(
        undefined=Undefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


def render_template(
    template_text: str,
    parameters: Mapping[str, str],
    name: str = "Dockerfile",
) -> bytes:
    """Render template_text against parameters and return UTF-8 bytes.

    Raises:
        TemplateInvalidError: the template does not parse.
        TemplateExecutionError: the template parsed but rendering failed.
    """
    env = _environment()
    try:
        template = env.from_string(template_text)
    except TemplateSyntaxError as exc:
        logger.debug("Template %s failed to parse at line %s: %s", name, exc.lineno, exc.message)
        raise TemplateInvalidError(name, exc.message or str(exc), lineno=exc.lineno, cause=exc) from exc

    try:
        text = template.render(dict(parameters))
    except (TemplateError, TypeError, ValueError, AttributeError, LookupError, ArithmeticError) as exc:
        logger.debug("Template %s failed to render: %s", name, exc)
        raise TemplateExecutionError(name, str(exc), cause=exc) from exc

    return text.encode("utf-8")
