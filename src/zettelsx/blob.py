#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zettelsx/blob.py
"""Binary payload encoding for BLOB and EMBED-BLOB nodes.

The content slot of a BLOB node is a string. SVG images are stored verbatim
as text; every other syntax stores its bytes as standard base64.
"""

from __future__ import annotations

import base64
import binascii
import logging

from zettelsx.constants import BLOB_TEXT_ENCODING, SVG_SYNTAX

logger = logging.getLogger(__name__)


def is_text_syntax(syntax: str) -> bool:
    """Return True if BLOBs of the given syntax carry their payload as text."""
    return syntax == SVG_SYNTAX


def encode_binary(syntax: str, data: bytes) -> str:
    """Encode a binary payload into the string carried by a BLOB node.

    Parameters
    ----------
    syntax : str
        Syntax identifier of the BLOB (e.g. "png", "svg")
    data : bytes
        Payload to encode

    Returns
    -------
    str
        Text for SVG (undecodable bytes are kept through surrogate escapes),
        base64 for every other syntax

    """
    if is_text_syntax(syntax):
        return data.decode(BLOB_TEXT_ENCODING, errors="surrogateescape")
    return base64.b64encode(data).decode("ascii")


def decode_binary(syntax: str, content: str) -> bytes:
    """Decode the string carried by a BLOB node back into bytes.

    Parameters
    ----------
    syntax : str
        Syntax identifier of the BLOB
    content : str
        Encoded payload

    Returns
    -------
    bytes
        Decoded payload, or empty bytes if the content cannot be decoded

    """
    if is_text_syntax(syntax):
        try:
            return content.encode(BLOB_TEXT_ENCODING, errors="surrogateescape")
        except UnicodeEncodeError as e:
            logger.debug(f"Cannot decode {syntax!r} BLOB content: {e}")
            return b""
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Cannot decode {syntax!r} BLOB content: {e}")
        return b""
