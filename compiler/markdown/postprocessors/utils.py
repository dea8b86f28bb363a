"""Helpers for postprocessors that add attributes to existing tags."""

from __future__ import annotations

from ..patterns import CLASS_ATTR_RE, ID_ATTR_RE


def merge_class_attribute(attrs: str, token: str) -> tuple[str, bool]:
    """Add ``token`` to the ``class`` attribute already present in ``attrs``.

    Returns the updated attribute string and whether a ``class`` attribute was
    found.  When none is found ``attrs`` is returned unchanged and the caller
    writes its own ``class="..."``.
    """
    match = CLASS_ATTR_RE.search(attrs)
    if not match:
        return attrs, False

    classes = match.group(1).split()
    if token not in classes:
        classes.append(token)
    merged = f'class="{" ".join(classes)}"'
    return attrs[: match.start()] + merged + attrs[match.end():], True


def strip_id_attribute(attrs: str) -> str:
    """Remove any ``id="..."`` so a generated id is the only one on the tag."""
    return ID_ATTR_RE.sub("", attrs)
