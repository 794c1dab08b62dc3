"""Exceptions raised by runtime plugins and the registry.

Only rendering problems (and, in strict mode, port acquisition) abort a
generation call. Everything else degrades to a default and is logged.
"""

from typing import Optional


class DockgenError(Exception):
    """Base class for every error dockgen raises on purpose."""


class RenderError(DockgenError):
    """Raised when a Dockerfile template cannot be rendered.

    Carries the template name and original Jinja2 error for upstream logging.
    """

    def __init__(self, template: str, message: str, cause: Optional[Exception] = None):
        self.template = template
        self.cause = cause
        super().__init__(f"[{template}] {message}")


class TemplateInvalidError(RenderError):
    """The template text does not parse."""

    def __init__(self, template: str, message: str, lineno: Optional[int] = None,
                 cause: Optional[Exception] = None):
        self.lineno = lineno
        where = f" (line {lineno})" if lineno else ""
        super().__init__(template, f"invalid template{where}: {message}", cause)


class TemplateExecutionError(RenderError):
    """The template parsed but failed while rendering."""

    def __init__(self, template: str, message: str, cause: Optional[Exception] = None):
        super().__init__(template, f"failed to render template: {message}", cause)


class PortAcquisitionError(DockgenError):
    """Raised in strict mode when no port number could be obtained."""


class NoRuntimeDetectedError(DockgenError):
    """No registered runtime matched the project directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"no supported runtime detected in {path}")


class UnknownRuntimeError(DockgenError):
    """A runtime was requested by name but is not registered."""
