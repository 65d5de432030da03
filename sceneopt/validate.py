from typing import List, Optional

from .context import Context


class ValidationError(Exception):
    pass


def _context_path(path: List[str]) -> str:
    return "/".join(path) or "<root>"


def _check_vector_lengths(ctx: Context, path: List[str]) -> None:
    lengths = {}
    for form in ctx.form_children:
        if form.is_vector:
            lengths.setdefault(len(form), f"form {type(form[0]).__name__}")
    for prop in ctx.property_children:
        if prop.is_vector:
            lengths.setdefault(len(prop), f"property {prop.kind}")
    if len(lengths) > 1:
        found = ", ".join(f"{name} has {n}" for n, name in sorted(lengths.items()))
        raise ValidationError(f"[{_context_path(path)}] vector children differ in length: {found}")


def validate_context(ctx: Context, *, _path: Optional[List[str]] = None) -> None:
    """Check that every context's vector siblings share one length.

    The optimizer assumes this without checking; call this on trees built
    from untrusted input before drawing them.
    """

    path = _path if _path is not None else []
    _check_vector_lengths(ctx, path)
    for idx, child in enumerate(ctx.container_children):
        label = child.tag if child.tag else str(idx)
        validate_context(child, _path=path + [label])
