"""Map ruamel.yaml comment attachments onto head/line/foot/tail slots.

ruamel.yaml's round-trip scanner hangs comments off tokens as a small list:

* ``[0]`` the comment following the node, starting on the node's own line
  when there is an end-of-line comment and possibly running over the
  comment lines below it;
* ``[1]`` the comment lines preceding the node;
* ``[2:]`` further trailing comments.

Entries are ``CommentToken`` objects, lists of them, or ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CommentSlots:
    """Comment text per slot; ``None`` when nothing was attached."""

    head: bytes | None = None
    line: bytes | None = None
    foot: bytes | None = None
    tail: bytes | None = None


def _token_texts(entry: Any) -> list[str]:
    """Flatten a comment entry into the raw text of its tokens."""
    if entry is None:
        return []
    if isinstance(entry, (list, tuple)):
        texts: list[str] = []
        for item in entry:
            texts.extend(_token_texts(item))
        return texts
    value = getattr(entry, "value", entry)
    return [value] if isinstance(value, str) else []


def _tokens(entry: Any) -> list[Any]:
    if entry is None:
        return []
    if isinstance(entry, (list, tuple)):
        return [token for item in entry for token in _tokens(item)]
    return [entry]


def _token_key(token: Any) -> tuple[Any, ...]:
    mark = getattr(token, "start_mark", None)
    if mark is None:
        return (id(token),)
    return (getattr(token, "value", None), mark.line, mark.column)


def _comment_lines(texts: list[str]) -> list[str]:
    lines: list[str] = []
    for text in texts:
        for raw_line in text.splitlines():
            stripped = raw_line.strip()
            if stripped:
                lines.append(stripped)
    return lines


def _encode(lines: list[str]) -> bytes:
    return "\n".join(lines).encode("utf-8")


def _preceding(entry: Any) -> bytes | None:
    texts = _token_texts(entry)
    if not texts:
        return None
    return _encode(_comment_lines(texts))


def split_comments(raw: Any, *, closing: bool = False) -> CommentSlots:
    """Split an engine comment attachment into the four comment slots.

    Comments preceding a node become its head comment.  On closing events
    (``closing=True``) there is no node to lead into, so they are reported as
    the tail comment instead.
    """
    if raw is None:
        return CommentSlots()
    if not isinstance(raw, (list, tuple)):
        raw = [raw]

    before = _preceding(raw[1]) if len(raw) > 1 else None
    head, tail = (None, before) if closing else (before, None)

    line: bytes | None = None
    foot_lines: list[str] = []
    foot_attached = False

    after = _token_texts(raw[0]) if raw else []
    if after:
        first_line, _, rest = after[0].partition("\n")
        if first_line.strip().startswith("#"):
            line = _encode([first_line.strip()])
            after = [rest, *after[1:]]
        foot_lines.extend(_comment_lines(after))
        foot_attached = line is None or bool(foot_lines)

    # ruamel re-lists an already attached comment in the trailing entries
    # when it moves a key comment onto a collection start.
    seen = {_token_key(token) for entry in raw[:2] for token in _tokens(entry)}
    for entry in raw[2:]:
        fresh = [token for token in _tokens(entry) if _token_key(token) not in seen]
        seen.update(_token_key(token) for token in fresh)
        texts = _token_texts(fresh)
        if texts:
            foot_attached = True
            foot_lines.extend(_comment_lines(texts))

    foot = _encode(foot_lines) if foot_attached else None
    return CommentSlots(head=head, line=line, foot=foot, tail=tail)
