"""Strategy selection and the curated template catalog."""

from .catalog import TEMPLATE_CATALOG, TemplateSlot, template_for
from .selector import initial_rows, resolve_columns, select_strategy, uses_template

__all__ = [
    "TEMPLATE_CATALOG",
    "TemplateSlot",
    "template_for",
    "initial_rows",
    "resolve_columns",
    "select_strategy",
    "uses_template",
]
