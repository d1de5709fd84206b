"""
Atlassian Document Format (ADF) utilities.

Jira Cloud's v3 API stores rich text fields (description, comment body) as
ADF documents. Only the minimal shape is produced and read here: one
paragraph holding one text run. Lists, extra paragraphs and marks are not
represented when reading.
"""

from typing import Any


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in a single-paragraph ADF document.

    ADF rejects empty text nodes, so an empty string becomes an empty
    paragraph.

    Args:
        text: Plain text

    Returns:
        ADF document dict
    """
    paragraph: dict[str, Any] = {"type": "paragraph", "content": []}
    if text:
        paragraph["content"].append({"type": "text", "text": text})
    return {"type": "doc", "version": 1, "content": [paragraph]}


def adf_first_text(adf_content: Any) -> str | None:
    """
    Extract the first text run of the first block of an ADF document.

    Plain strings (as returned by v2 endpoints) are passed through.

    Args:
        adf_content: ADF document dict, plain string, or None

    Returns:
        The text of the first run, or None if there is none
    """
    if isinstance(adf_content, str):
        return adf_content or None
    if not isinstance(adf_content, dict):
        return None

    blocks = adf_content.get("content")
    if not isinstance(blocks, list) or not blocks or not isinstance(blocks[0], dict):
        return None

    runs = blocks[0].get("content")
    if not isinstance(runs, list) or not runs or not isinstance(runs[0], dict):
        return None

    text = runs[0].get("text")
    return text if isinstance(text, str) and text else None
