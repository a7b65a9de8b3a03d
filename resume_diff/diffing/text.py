"""Word-level text diffing."""

from __future__ import annotations

import re
from difflib import SequenceMatcher

from resume_diff.diffing.models import DiffToken, DiffTokenType, TokenChangeCount

# Words and the whitespace runs between them, so spans concatenate back losslessly.
_TOKEN_PATTERN = re.compile(r"\s+|\S+")


def tokenize(text: str) -> list[str]:
    """Split text into alternating word and whitespace tokens."""
    return _TOKEN_PATTERN.findall(text)


def _append(tokens: list[DiffToken], kind: DiffTokenType, text: str) -> None:
    if not text:
        return
    if tokens and tokens[-1].type == kind:
        tokens[-1] = DiffToken(type=kind, text=tokens[-1].text + text)
    else:
        tokens.append(DiffToken(type=kind, text=text))


def diff_text(original: str | None, tailored: str | None) -> list[DiffToken]:
    """Compute an ordered edit script between two strings.

    Dropping ``added`` spans from the result reconstructs ``original``;
    dropping ``removed`` spans reconstructs ``tailored``. Within a changed
    region the removed span precedes the added one.
    """
    original = original or ""
    tailored = tailored or ""

    if not original and not tailored:
        return []
    if not original:
        return [DiffToken(type="added", text=tailored)]
    if not tailored:
        return [DiffToken(type="removed", text=original)]

    source = tokenize(original)
    target = tokenize(tailored)
    matcher = SequenceMatcher(None, source, target, autojunk=False)

    tokens: list[DiffToken] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(tokens, "equal", "".join(source[i1:i2]))
            continue
        _append(tokens, "removed", "".join(source[i1:i2]))
        _append(tokens, "added", "".join(target[j1:j2]))

    return tokens


def has_changes(tokens: list[DiffToken]) -> bool:
    """Return True if any span is added or removed."""
    return any(token.type != "equal" for token in tokens)


def count_changes(tokens: list[DiffToken]) -> TokenChangeCount:
    """Count added and removed spans."""
    added = sum(1 for token in tokens if token.type == "added")
    removed = sum(1 for token in tokens if token.type == "removed")
    return TokenChangeCount(added=added, removed=removed)
