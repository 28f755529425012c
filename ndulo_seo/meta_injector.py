"""Splices rendered SEO tags into the SPA's index document."""

import logging

from flask import current_app, make_response, render_template
from markupsafe import Markup

from ndulo_seo.meta_catalog import MetadataRecord

logger = logging.getLogger(__name__)

HEAD_CLOSE = '</head>'


def script_safe(payload: str) -> Markup:
    """Escape a JSON document for an inline <script> element.

    ``<``, ``>`` and ``&`` only ever occur inside JSON strings, so their
    ``\\uXXXX`` forms decode to the same value.
    """
    return Markup(
        payload.replace('<', '\\u003c')
        .replace('>', '\\u003e')
        .replace('&', '\\u0026')
    )


def splice(document: str, block: str, marker: str = HEAD_CLOSE) -> str:
    """Insert ``block`` right before the first ``marker``; no-op without one."""
    index = document.find(marker)
    if index == -1:
        return document
    return document[:index] + block + document[index:]


def render_meta_tags(meta: MetadataRecord) -> str:
    return render_template('meta_tags.html', meta=meta)


def inject_meta_tags(meta: MetadataRecord):
    path = current_app.config['INDEX_TEMPLATE']
    try:
        with open(path, encoding='utf-8') as f:
            html_template = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error('Failed to read %s: %s', path, e)
        response = make_response('Failed to load HTML', 500)
        response.mimetype = 'text/plain'
        return response

    html = splice(html_template, render_meta_tags(meta) + '\n')
    response = make_response(html, 200)
    response.mimetype = 'text/html'
    return response
