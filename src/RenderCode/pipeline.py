from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from . import debug_dump, markdown_parser
from .config import RenderConfig
from .errors import UnsupportedConstructError
from .model import Document
from .printer import PrefixMode, print_nodes
from .tree_mapper import map_document

logger = logging.getLogger(__name__)

Formatter = Callable[[str], str]


@dataclass(frozen=True)
class Preview:
    """Artifacts produced from one markup text.

    ``code`` is empty whenever ``error`` is set; ``html`` and ``details`` are
    computed independently and survive a rejected construct.
    """

    code: str
    html: Optional[str] = None
    details: Optional[str] = None
    error: Optional[str] = None


def render_code(document: Document, prefix_mode: PrefixMode = PrefixMode.BARE) -> str:
    return print_nodes(map_document(document), prefix_mode)


def render_preview(
    text: str,
    config: RenderConfig | None = None,
    formatter: Formatter | None = None,
) -> Preview:
    config = config or RenderConfig()
    md = markdown_parser.build_markdown_parser()
    tokens, env = markdown_parser.parse_tokens(text, md)
    html = markdown_parser.render_html(tokens, env, md) if config.html_preview else None

    try:
        document = markdown_parser.build_document(tokens)
    except UnsupportedConstructError as exc:
        logger.warning("Markup rejected: %s", exc)
        return Preview(code="", html=html, error=str(exc))

    details = debug_dump.dump_document(document) if config.show_details else None
    try:
        code = render_code(document, config.prefix_mode)
    except UnsupportedConstructError as exc:
        logger.warning("Code generation rejected: %s", exc)
        return Preview(code="", html=html, details=details, error=str(exc))

    if formatter is not None:
        code = formatter(code)
    return Preview(code=code, html=html, details=details)
