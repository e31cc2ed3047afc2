"""
Log formatting helpers.

Dependencies: None
System role: Keeps user text in log lines short and on one line
"""


def preview(text: str | None, max_length: int = 120) -> str:
    """
    Collapse whitespace and truncate text for a single log line.

    Args:
        text: User question, chunk content or model output
        max_length: Characters kept before the ellipsis

    Returns:
        str: One-line preview, "None" for missing text
    """
    if text is None:
        return "None"
    flattened = " ".join(text.split())
    if len(flattened) > max_length:
        return f"{flattened[:max_length]}... ({len(flattened)} chars)"
    return flattened
