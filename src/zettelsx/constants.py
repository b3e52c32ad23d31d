#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the zettelsx library.

This module centralizes the hardcoded values and default configuration
constants used across the library.

Constants are organized by category:
1. Attributes - well-known attribute keys
2. BLOB Encoding - syntax identifiers with special payload handling
3. Walker - environment defaults
4. Reader - limits for reading written node trees
"""

from __future__ import annotations

# =============================================================================
# Attributes
# =============================================================================

# Key of the default attribute
DEFAULT_ATTRIBUTE = "-"

CLASS_ATTRIBUTE = "class"

# =============================================================================
# BLOB Encoding
# =============================================================================

# BLOBs with this syntax carry their bytes verbatim as text, all others use base64
SVG_SYNTAX = "svg"

BLOB_TEXT_ENCODING = "utf-8"

# =============================================================================
# Walker
# =============================================================================

# Position reported when the environment carries no walk position
NO_WALK_POS = -1

# =============================================================================
# Reader
# =============================================================================

# Deepest list nesting the reader accepts
DEFAULT_READER_MAX_DEPTH = 256
