"""
Filename templating with string helper filters
"""

import re
import unicodedata
from typing import Callable, Dict, Mapping

from jinja2 import TemplateError, TemplateSyntaxError, Undefined
from jinja2.sandbox import SandboxedEnvironment

from .errors import TemplateCompileError, TemplateRenderError

_EXPRESSION = re.compile(r"\{\{.*?\}\}", re.DOTALL)
# Leading dot of a Go-style field reference inside a "{{ }}" tag
_GO_FIELD = re.compile(r"(^-?|[\s(,~|+\[])\.(?=[^\W\d])")
_CAMEL_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_CAMEL_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[\W_]+")


def _words(value: str):
    value = _CAMEL_LOWER_UPPER.sub(r"\1 \2", value)
    value = _CAMEL_ACRONYM.sub(r"\1 \2", value)
    return [w for w in _SEPARATORS.split(value) if w]


def snakecase(value: str) -> str:
    return "_".join(w.lower() for w in _words(str(value)))


def kebabcase(value: str) -> str:
    return "-".join(w.lower() for w in _words(str(value)))


def camelcase(value: str) -> str:
    """Title-case each word and join them: "acme corp" -> "AcmeCorp"."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(str(value)))


def swapcase(value: str) -> str:
    return str(value).swapcase()


def nospace(value: str) -> str:
    return "".join(str(value).split())


def initials(value: str) -> str:
    return "".join(w[0] for w in str(value).split())


def trunc(value: str, length: int) -> str:
    """Keep the first ``length`` characters, or the last ones when negative"""
    value = str(value)
    if length < 0:
        return value[length:]
    return value[:length]


def abbrev(value: str, width: int) -> str:
    """Shorten to ``width`` characters with a trailing ellipsis"""
    value = str(value)
    if width < 4 or len(value) <= width:
        return value
    return value[: width - 3] + "..."


def slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", str(value))
    value = value.encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value).strip().lower()
    return re.sub(r"[-\s_]+", "-", value).strip("-")


HELPERS: Dict[str, Callable] = {
    "snakecase": snakecase,
    "kebabcase": kebabcase,
    "camelcase": camelcase,
    "swapcase": swapcase,
    "nospace": nospace,
    "initials": initials,
    "trunc": trunc,
    "abbrev": abbrev,
    "slugify": slugify,
}


class FilenameGenerator:
    """Compiles a filename format once and renders it against extracted fields"""

    def __init__(self, filename_format: str):
        self.filename_format = filename_format
        self.environment = SandboxedEnvironment(undefined=Undefined, autoescape=False)
        self.environment.filters.update(HELPERS)
        try:
            self.template = self.environment.from_string(
                self.to_jinja(filename_format)
            )
        except TemplateSyntaxError as e:
            raise TemplateCompileError(f"failed to parse filename format: {e}") from e

    @staticmethod
    def to_jinja(filename_format: str) -> str:
        """Accept Go-style leading-dot field references"""
        return _EXPRESSION.sub(
            lambda m: "{{" + _GO_FIELD.sub(r"\1", m.group(0)[2:-2]) + "}}",
            filename_format,
        )

    def generate_filename(self, fields: Mapping[str, str]) -> str:
        try:
            return self.template.render(dict(fields))
        except (TemplateError, TypeError, ValueError) as e:
            raise TemplateRenderError(
                f"failed to execute filename format: {e}"
            ) from e
