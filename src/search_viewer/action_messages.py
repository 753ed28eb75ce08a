"""UI-facing copy builders for alerts and command-line errors."""

from __future__ import annotations


def _ensure_sentence(text: str) -> str:
    """Return text with terminal sentence punctuation."""
    cleaned = text.strip()
    if not cleaned:
        return ""
    if cleaned.endswith((".", "!", "?")):
        return cleaned
    return f"{cleaned}."


def build_next_step_hint(next_step: str) -> str:
    """Build a canonical next-step guidance line."""
    return f"Next step: {_ensure_sentence(next_step)}"


def build_actionable_error(
    action: str,
    *,
    next_step: str,
    why: str | None = None,
) -> str:
    """Build a 2-3 line actionable error message."""
    lines = [f"Could not {action.strip()}."]
    if why:
        lines.append(f"Why: {_ensure_sentence(why)}")
    lines.append(build_next_step_hint(next_step))
    return "\n".join(lines)


def describe_error(exc: BaseException) -> str:
    """Return the error's own message, falling back to its type name."""
    message = str(exc).strip()
    return message or type(exc).__name__


def build_request_error(action: str, exc: BaseException) -> str:
    """Build alert text for a failed session or search request.

    The error's message is always included verbatim on the second line.
    """
    return f"Could not {action.strip()}.\n{describe_error(exc)}"


__all__ = [
    "build_actionable_error",
    "build_next_step_hint",
    "build_request_error",
    "describe_error",
]
