# -*- coding: utf-8 -*-
"""
SVG dimension extractor module.

Reads width, height and viewBox straight from the text of the root <svg>
tag with regular expressions; no XML parsing is done. A '>' inside an
attribute value of the root tag cuts the tag short.

Date: 2026-10-19
"""

import re
from typing import Any, Dict, Optional


ROOT_TAG_PATTERN = re.compile(r'<svg[^>]*>', re.IGNORECASE)
UNIT_PATTERN = re.compile(r'(%|px|em|rem|pt|in)$', re.IGNORECASE)
VIEWBOX_SEPARATOR = re.compile(r'[\s,]+')

NO_DIMENSIONS_MESSAGE = ("Warning: No explicit 'width', 'height', or derivable 'viewBox' found. "
                         "SVG will likely scale to its container.")


def extract_attribute(tag: str, attribute_name: str) -> Optional[str]:
    """
    Extract a quoted attribute value from a tag string.

    Args:
        tag: Text of the opening tag
        attribute_name: Attribute to look up (case-insensitive)

    Returns:
        The attribute value or None if not found
    """
    pattern = re.compile(rf'{re.escape(attribute_name)}\s*=\s*["\']([^"\']*)["\']', re.IGNORECASE)
    match = pattern.search(tag)
    return match.group(1) if match else None


def get_svg_dimensions(svg_content: str) -> Dict[str, Any]:
    """
    Determine the dimensions of an SVG document.

    Explicit width/height attributes win. A missing dimension is taken from
    the viewBox when it has exactly four parts.

    Args:
        svg_content: Full text of the SVG file

    Returns:
        Dict with 'width', 'height', 'unit', 'viewBox' and 'source', plus
        'message' when nothing usable was found, or only 'error' when there
        is no root tag
    """
    root_match = ROOT_TAG_PATTERN.search(svg_content)
    if not root_match:
        return {"error": "Could not find the root <svg> tag."}

    root_tag = root_match.group(0)

    width = extract_attribute(root_tag, 'width')
    height = extract_attribute(root_tag, 'height')
    view_box = extract_attribute(root_tag, 'viewBox')

    dimensions = {
        "width": width,
        "height": height,
        "unit": "unknown",
        "viewBox": view_box,
        "source": "attributes" if (width or height) else "none found",
    }

    if (not width or not height) and view_box:
        parts = VIEWBOX_SEPARATOR.split(view_box.strip())
        # min-x min-y width height
        if len(parts) == 4:
            if not width:
                dimensions["width"] = parts[2]
            if not height:
                dimensions["height"] = parts[3]
            dimensions["unit"] = "unitless (from viewBox)"
            dimensions["source"] = "viewBox aspect ratio"

    if dimensions["source"] == "attributes" and width:
        unit_match = UNIT_PATTERN.search(width)
        dimensions["unit"] = unit_match.group(0) if unit_match else "unitless (default px)"

    if dimensions["width"] is None and dimensions["height"] is None:
        return {
            "width": None,
            "height": None,
            "viewBox": view_box,
            "source": "none found",
            "message": NO_DIMENSIONS_MESSAGE,
        }

    return dimensions
