"""
Facet traversal - read and write attribute tags through any container.

Every function here recurses structurally through:
- lists, dict values, and tuples (only the second component of a pair)
- Note, Event, Placed, Voice, Score, Track, Reactive, Context
- Tagged values of other facets (into their payload)

A Tagged value of the requested facet is where recursion stops: its tag
is the facet value. Anything else is a leaf. None is an empty slot
(a rest) and is never tagged.

Tag traversal only ever touches values, never durations or spans, so it
commutes with transformation and splitting.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from chuk_music_time.attributes.tagged import Facet, Tagged
from chuk_music_time.core.event import Event, Placed
from chuk_music_time.core.note import Note
from chuk_music_time.core.reactive import Reactive
from chuk_music_time.core.score import Score
from chuk_music_time.core.track import Track
from chuk_music_time.core.voice import Context, Voice

Visit = Callable[[Any], Any]


def _children(x: Any) -> list[Any] | None:
    """Sub-values to recurse into, or None for a leaf."""
    if isinstance(x, (Note, Event, Placed)):
        return [x.value]
    if isinstance(x, Voice):
        return list(x.notes)
    if isinstance(x, Score):
        return list(x.events)
    if isinstance(x, Track):
        return list(x.placed)
    if isinstance(x, Reactive):
        return [x.initial] + [value for _, value in x.changes]
    if isinstance(x, Context):
        return [x.previous, x.current, x.next]
    if isinstance(x, list):
        return x
    if isinstance(x, dict):
        return list(x.values())
    if type(x) is tuple:
        return [x[1]] if len(x) == 2 else list(x)
    return None


def _rebuild(x: Any, visit: Visit) -> Any:
    """Rebuild a container with ``visit`` applied to each sub-value."""
    if isinstance(x, Note):
        return Note(x.duration, visit(x.value))
    if isinstance(x, Event):
        return Event(x.span, visit(x.value))
    if isinstance(x, Placed):
        return Placed(x.time, visit(x.value))
    if isinstance(x, Voice):
        return Voice(tuple(visit(n) for n in x.notes))
    if isinstance(x, Score):
        return Score(tuple(visit(e) for e in x.events))
    if isinstance(x, Track):
        return Track(tuple(visit(p) for p in x.placed))
    if isinstance(x, Reactive):
        return Reactive(visit(x.initial), tuple((t, visit(value)) for t, value in x.changes))
    if isinstance(x, Context):
        return Context(visit(x.previous), visit(x.current), visit(x.next))
    if isinstance(x, list):
        return [visit(item) for item in x]
    if isinstance(x, dict):
        return {key: visit(value) for key, value in x.items()}
    if type(x) is tuple:
        if len(x) == 2:
            return (x[0], visit(x[1]))
        return tuple(visit(item) for item in x)
    raise TypeError(f"{type(x).__name__} is not a container")


def _traverse(facet: Facet | None, x: Any, on_tag: Visit, on_leaf: Visit) -> Any:
    if x is None:
        return None
    if isinstance(x, Tagged):
        if facet is not None and x.facet == facet:
            return x.with_tag(on_tag(x.tag))
        return x.with_value(_traverse(facet, x.value, on_tag, on_leaf))
    if _children(x) is None:
        return on_leaf(x)
    return _rebuild(x, lambda child: _traverse(facet, child, on_tag, on_leaf))


def facets(facet: Facet, x: Any) -> list[Any]:
    """All tags of ``facet`` in ``x``, in traversal order."""
    if isinstance(x, Tagged):
        if x.facet == facet:
            return [x.tag]
        return facets(facet, x.value)
    children = _children(x)
    if children is None:
        return []
    return [tag for child in children for tag in facets(facet, child)]


def map_facets(facet: Facet, f: Callable[[Any], Any], x: Any) -> Any:
    """Apply ``f`` to every tag of ``facet``; untagged values are left alone."""
    return _traverse(facet, x, f, lambda leaf: leaf)


def update_facet(facet: Facet, f: Callable[[Any], Any], default: Any, x: Any) -> Any:
    """
    Apply ``f`` to every tag of ``facet``.

    Untagged leaves are tagged with ``f(default)``.
    """
    return _traverse(facet, x, f, lambda leaf: Tagged(facet, f(default), leaf))


def set_facet(facet: Facet, tag: Any, x: Any) -> Any:
    """
    Set every tag of ``facet`` to ``tag``, tagging untagged leaves.

    Idempotent: set_facet(f, t, set_facet(f, t, x)) == set_facet(f, t, x).
    """
    return update_facet(facet, lambda _: tag, None, x)


def leaves(x: Any) -> list[Any]:
    """All leaf values in ``x`` (payloads of any tags), skipping rests."""
    if x is None:
        return []
    if isinstance(x, Tagged):
        return leaves(x.value)
    children = _children(x)
    if children is None:
        return [x]
    return [leaf for child in children for leaf in leaves(child)]


def map_leaves(f: Callable[[Any], Any], x: Any) -> Any:
    """Apply ``f`` to every leaf value, keeping all tags and timing."""
    return _traverse(None, x, lambda tag: tag, f)


def tag(facet: Facet, tag: Any, x: Any) -> Tagged[Any, Any]:
    """Wrap ``x`` as a whole in a single tag, without traversing it."""
    return Tagged(facet, tag, x)
