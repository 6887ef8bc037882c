"""Route definition fragments and the merge that normalizes them.

A route declaration carries one or more fragments after its pattern::

    match("users/:id", "users#show", {"redirect": "/people/:id"})

Each fragment is either a shorthand string (``"controller#action"``) or a
partial record. Both are wrapped in a small tagged type so the merge
never inspects raw values; :func:`as_fragment` does the wrapping at the
capture boundary.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from perch.errors import ConfigurationError

# Merged definition: controller, action, and any extra metadata
RouteDefinition: TypeAlias = dict[str, Any]


@dataclass(frozen=True, slots=True)
class Shorthand:
    """A ``"controller#action"`` fragment.

    Splits on the first ``#``. Without a ``#`` the whole text is the
    controller and the action is absent.
    """

    text: str

    def apply(self, definition: RouteDefinition) -> None:
        controller, sep, action = self.text.partition("#")
        definition["controller"] = controller
        definition["action"] = action if sep else None


@dataclass(frozen=True, slots=True)
class RecordFragment:
    """A partial definition record, merged key by key."""

    values: Mapping[str, Any]

    def apply(self, definition: RouteDefinition) -> None:
        definition.update(self.values)


Fragment: TypeAlias = Shorthand | RecordFragment


def as_fragment(value: Any) -> Fragment:
    """Wrap a raw captured value in its fragment type.

    Raises ``ConfigurationError`` for anything that is neither a string
    nor a mapping.
    """
    if isinstance(value, Shorthand | RecordFragment):
        return value
    if isinstance(value, str):
        return Shorthand(value)
    if isinstance(value, Mapping):
        return RecordFragment(value)
    msg = (
        f"Route definition fragments must be 'controller#action' strings or mappings, "
        f"got {type(value).__name__}: {value!r}"
    )
    raise ConfigurationError(msg)


def merge_fragments(fragments: Iterable[Fragment]) -> RouteDefinition:
    """Merge fragments in order into one definition. Last writer wins."""
    definition: RouteDefinition = {}
    for fragment in fragments:
        fragment.apply(definition)
    return definition


def parse_definitions(values: Iterable[Any]) -> RouteDefinition:
    """Normalize raw captured fragments into one ``RouteDefinition``.

    Examples::

        parse_definitions(["users#show"])
        # {"controller": "users", "action": "show"}

        parse_definitions(["users#show", {"action": "edit", "auth": True}])
        # {"controller": "users", "action": "edit", "auth": True}
    """
    return merge_fragments(as_fragment(value) for value in values)
