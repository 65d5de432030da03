"""The scene-graph node and the operators that build and walk it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .forms import Form, FormPrimitive
from .properties import Property, PropertyPrimitive

Style = Dict[str, PropertyPrimitive]
StyleKey = Tuple[PropertyPrimitive, ...]
Child = Union[Form, Property, "Context"]


@dataclass
class Context:
    """A tree node holding forms, properties and child contexts.

    Sibling order within each list is paint order.  A vector form and a vector
    property living in the same context are bound positionally: element ``i``
    of the form is styled by element ``i`` of the property.
    """

    form_children: List[Form] = field(default_factory=list)
    property_children: List[Property] = field(default_factory=list)
    container_children: List["Context"] = field(default_factory=list)
    tag: Optional[str] = None

    def copy(self) -> "Context":
        """Return a shallow copy whose child lists can be mutated independently."""

        return replace(
            self,
            form_children=list(self.form_children),
            property_children=list(self.property_children),
            container_children=list(self.container_children),
        )

    def count_contexts(self) -> int:
        return 1 + sum(child.count_contexts() for child in self.container_children)


def compose(ctx: Context, *children: Child) -> Context:
    """Append ``children`` to the matching child lists of ``ctx`` and return it."""

    for child in children:
        if isinstance(child, Form):
            ctx.form_children.append(child)
        elif isinstance(child, Property):
            ctx.property_children.append(child)
        elif isinstance(child, Context):
            if child is ctx:
                raise ValueError("a context cannot be composed into itself")
            ctx.container_children.append(child)
        else:
            raise TypeError(f"cannot compose {type(child).__name__} into a context")
    return ctx


def context(*children: Child, tag: Optional[str] = None) -> Context:
    return compose(Context(tag=tag), *children)


def resolve_properties(
    ctx: Context, inherited: Optional[Mapping[str, PropertyPrimitive]] = None
) -> Tuple[Style, List[Property]]:
    """Return the scalar style in effect inside ``ctx`` and its vector properties."""

    style: Style = dict(inherited or {})
    vector_properties: List[Property] = []
    for prop in ctx.property_children:
        if prop.is_vector:
            vector_properties.append(prop)
        else:
            style[prop.kind] = prop[0]
    return style, vector_properties


def element_style(style: Mapping[str, PropertyPrimitive], vector_properties: List[Property], index: int) -> Style:
    resolved = dict(style)
    for prop in vector_properties:
        resolved[prop.kind] = prop[index % len(prop)]
    return resolved


def style_key(style: Mapping[str, PropertyPrimitive]) -> StyleKey:
    return tuple(style[kind] for kind in sorted(style))


def iter_draw_set(
    ctx: Context, inherited: Optional[Mapping[str, PropertyPrimitive]] = None
) -> Iterator[Tuple[FormPrimitive, StyleKey]]:
    style, vector_properties = resolve_properties(ctx, inherited)
    for form in ctx.form_children:
        for i, prim in enumerate(form):
            yield prim, style_key(element_style(style, vector_properties, i))
    for child in ctx.container_children:
        yield from iter_draw_set(child, style)


def flatten_draw_set(ctx: Context) -> List[Tuple[FormPrimitive, StyleKey]]:
    """Return every ``(primitive, resolved style)`` pair drawing ``ctx`` produces."""

    return list(iter_draw_set(ctx))


__all__ = [
    "Context",
    "Style",
    "StyleKey",
    "compose",
    "context",
    "resolve_properties",
    "element_style",
    "style_key",
    "iter_draw_set",
    "flatten_draw_set",
]
