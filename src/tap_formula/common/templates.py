"""Tap template lookup and placeholder substitution."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

from tap_formula.common.config import DEFAULT_TEMPLATE_PATHS
from tap_formula.common.schema import PLACEHOLDERS, FormulaArgs

LOGGER = logging.getLogger("tapformula.templates")


class TemplateMissingError(FileNotFoundError):
    """None of the candidate template paths could be read."""

    def __init__(self, tried: list[str]) -> None:
        super().__init__("tap template missing")
        self.tried = tried


def load_template(paths: Iterable[str] = DEFAULT_TEMPLATE_PATHS) -> str:
    """
    Load the tap template from the first readable candidate.

    Args:
        paths: Candidate paths, tried in order.

    Raises:
        TemplateMissingError: if no candidate could be read.
    """
    tried: list[str] = []
    for path in paths:
        tried.append(path)
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.debug("Template not readable at %s: %s", path, e)
            continue
        LOGGER.debug("Using template %s", path)
        return content
    raise TemplateMissingError(tried)


def render_formula(template: str, args: FormulaArgs) -> str:
    """
    Substitute the placeholders with the invocation values.

    Args:
        template: Template content containing <version>, <darwin_sha256>
            and <linux_sha256>.
        args: Values to insert.

    Returns:
        Rendered formula.
    """
    for token, value in args.substitutions().items():
        template = template.replace(token, value)
    return template


def missing_placeholders(template: str) -> list[str]:
    """Tokens that never occur in the template."""
    return [token for token in PLACEHOLDERS if token not in template]
