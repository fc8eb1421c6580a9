# pdf/fonts.py
from __future__ import annotations
import io
import logging
import struct
from pathlib import Path
from typing import Optional, Tuple

import httpx
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from bill_maker import config

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"
DEFAULT_BOLD_FONT = "Helvetica-Bold"
CUSTOM_FONT = "CustomFont"


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_font(source: str, timeout: float = config.FONT_TIMEOUT,
               client: httpx.Client | None = None) -> Optional[bytes]:
    """
    Raw TTF bytes from a local path or an http(s) URL, or None.
    Never raises: every failure is logged as a warning.
    """
    if not source:
        return None

    if not _is_url(source):
        path = Path(source)
        if not path.exists():
            logger.warning("Custom font not found at %s, using %s", path, DEFAULT_FONT)
            return None
        try:
            return path.read_bytes()
        except OSError:
            logger.warning("Custom font at %s could not be read", path, exc_info=True)
            return None

    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                res = own_client.get(source)
        else:
            res = client.get(source, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Custom font fetch failed (%s): %s", source, exc)
        return None

    if not res.is_success:
        logger.warning("Custom font fetch returned HTTP %s for %s", res.status_code, source)
        return None
    return res.content


def register_font(data: bytes, name: str = CUSTOM_FONT) -> Optional[str]:
    # reportlab embeds (subsets) the TTF into the PDF itself
    try:
        pdfmetrics.registerFont(TTFont(name, io.BytesIO(data)))
    except (TTFError, ValueError, OSError, struct.error) as exc:
        logger.warning("Custom font could not be decoded: %s", exc)
        return None
    return name


def load_custom_font(source: str | None = None, timeout: float | None = None,
                     client: httpx.Client | None = None) -> Tuple[str, str]:
    """
    (regular, bold) font names to draw with.

    A single custom TTF serves as both regular and bold; without it the
    built-in Helvetica pair is returned.
    """
    source = config.FONT_SOURCE if source is None else source
    timeout = config.FONT_TIMEOUT if timeout is None else timeout

    data = fetch_font(source, timeout=timeout, client=client)
    name = register_font(data) if data else None
    if name is None:
        return DEFAULT_FONT, DEFAULT_BOLD_FONT
    logger.info("Using custom font from %s", source)
    return name, name
