"""
Plain-text renderings of command results.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from .actions import UNDEFINED
from .search import SearchResult

COOKIE_RULE = "\n\n" + "-" * 60 + "\n\n"
BLOCK_RULE = "\n\n" + "=" * 60 + "\n\n"


def _js_string(value: Any) -> str:
    """Render a scalar the way JavaScript's String() would."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(value: Any) -> str:
    """Format an evaluation result: arrays as ``[i]: v`` blocks, objects as ``key: value`` lines."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, list):
        return "\n\n".join(f"[{index}]: {format_value(item)}" for index, item in enumerate(value))
    if isinstance(value, dict):
        return "\n".join(f"{key}: {format_value(item)}" for key, item in value.items())
    return _js_string(value)


def format_cookies(cookies: Iterable[Mapping[str, Any]]) -> str:
    blocks = [
        "\n".join(
            [
                f"[{index}] {cookie.get('name', '')}",
                f"Value: {cookie.get('value', '')}",
                f"Domain: {cookie.get('domain', '')}",
                f"Path: {cookie.get('path', '')}",
                f"HttpOnly: {_js_string(cookie.get('httpOnly', False))}",
                f"Secure: {_js_string(cookie.get('secure', False))}",
            ]
        )
        for index, cookie in enumerate(cookies)
    ]
    if not blocks:
        return "No cookies found"
    return COOKIE_RULE.join(blocks)


def _element_lines(info: Mapping[str, Any]) -> List[str]:
    return [
        f"Tag: {info.get('tag', '')}",
        f"ID: {info.get('id') or '(none)'}",
        f"Classes: {info.get('classes') or '(none)'}",
        f"Selector: {info.get('selector', '')}",
        f"Text: {info.get('text') or '(none)'}",
        f"HTML: {info.get('html', '')}",
    ]


def format_element_info(info: Dict[str, Any] | List[Dict[str, Any]]) -> str:
    """One element block, or numbered blocks separated by a rule for a multi-select."""
    if isinstance(info, list):
        return BLOCK_RULE.join(
            "\n".join([f"[{index}]", *_element_lines(element)]) for index, element in enumerate(info)
        )
    return "\n".join(_element_lines(info))


def format_search_results(results: Iterable[SearchResult], include_content: bool = False) -> str:
    blocks = []
    for index, result in enumerate(results):
        block = f"[{index}] {result.title}\nLink: {result.link}\nSnippet: {result.snippet}"
        if include_content and result.content:
            block += f"\n\nContent:\n{result.content}"
        blocks.append(block)
    return BLOCK_RULE.join(blocks)
