"""
Factory: build populated data objects from a declarative definition.

A factory keeps an accumulated state mapping (definition defaults plus
everything applied through state()/sequence()) and turns it into instances
on make(). State values come in four kinds:

- literals, passed through as-is
- deferred computations (zero-argument callables), called at resolution time
- nested factories, cloned and made into sub-instances
- sequences, invoked once per instance and spliced in when they return a mapping
"""

import copy
import logging
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from .config import create_fake, create_rng, get_config
from .exceptions import ResolutionFailure
from .sequence import Sequence

logger = logging.getLogger(__name__)

SEQUENCE_KEY_PREFIX = "__sequence_"

StateUpdate = Union[
    Mapping[str, Any],
    Callable[[Dict[str, Any]], Mapping[str, Any]],
    Sequence,
]


class ValueKind(Enum):
    """Kinds of value a state entry can hold."""
    LITERAL = "literal"
    DEFERRED = "deferred"
    FACTORY = "factory"
    SEQUENCE = "sequence"


def kind_of(value: Any) -> ValueKind:
    """Classify a state value. Sequences are callable, so they are checked first."""
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, Factory):
        return ValueKind.FACTORY
    if callable(value) and not isinstance(value, type):
        return ValueKind.DEFERRED
    return ValueKind.LITERAL


class Factory(ABC):
    """
    Base class for object factories.

    Subclasses set ``data_object`` to the type being built and implement
    ``definition()``. Named state helpers are plain methods that return
    ``self.state(...)``:

        class VehicleFactory(Factory):
            data_object = Vehicle

            def definition(self):
                return {"make": self.fake.company(), "model": self.fake.word()}

            def mercedes(self):
                return self.state({"make": "Mercedes"})
    """

    data_object: Optional[Callable[..., Any]] = None

    def __init__(self):
        config = get_config()
        self.fake = create_fake(config)
        self.rng = create_rng(config)
        self._count = 1
        self._state: Dict[str, Any] = dict(self.definition())

    @classmethod
    def new(cls):
        """Default-construct a factory of this kind."""
        return cls()

    @abstractmethod
    def definition(self) -> Dict[str, Any]:
        """Default field values for one instance."""

    def state(self, update: StateUpdate) -> "Factory":
        """
        Merge an update into the accumulated state.

        Args:
            update: A mapping (merged key-wise), a callable receiving the
                current state and returning a mapping, or a Sequence (stored
                under its own key so several sequences can coexist)

        Returns:
            This factory, for chaining
        """
        if isinstance(update, Sequence):
            self._state[f"{SEQUENCE_KEY_PREFIX}{uuid.uuid4().hex}"] = update
        elif isinstance(update, Mapping):
            self._state.update(update)
        elif callable(update):
            self._state.update(update(dict(self._state)))
        else:
            raise TypeError(
                f"state() expects a mapping, a callable or a Sequence, "
                f"got {type(update).__name__}"
            )
        return self

    def sequence(self, *slots: Any) -> "Factory":
        """Cycle through ``slots`` across the instances of a batch."""
        return self.state(Sequence(*slots))

    def count(self, count: int) -> "Factory":
        """Set how many instances the next make() produces."""
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        self._count = count
        return self

    def make(self, overrides: Optional[Mapping[str, Any]] = None, /, **fields: Any) -> Any:
        """
        Build one instance, or a list of ``count`` instances.

        Args:
            overrides: Field values for this call only. They win over the
                definition, accumulated state and sequence values.
            **fields: Merged into ``overrides``. ``overrides`` is positional-only,
                so a field named "overrides" can be passed as a keyword.

        Returns:
            A single instance when count is 1, otherwise a list

        Raises:
            ResolutionFailure: If the target type rejects the resolved fields
        """
        overrides = {**(overrides or {}), **fields}

        self._state = {**self.definition(), **self._state}
        working = {**self._state, **overrides}

        logger.debug(f"Making {self._count} x {type(self).__name__}")

        try:
            if self._count == 1:
                return self._make_instance(working, overrides)
            return [self._make_instance(working, overrides) for _ in range(self._count)]
        finally:
            self._reset_sequences(working)

    def clone(self) -> "Factory":
        """
        Copy this factory so that making from the copy leaves it untouched.

        Sequences get their own cursors and nested factories are cloned
        recursively. The fake-value provider is shared.
        """
        twin = copy.copy(self)
        twin._state = {key: _clone_value(value) for key, value in self._state.items()}
        return twin

    def _make_instance(self, state: Dict[str, Any], pinned: Iterable[str] = ()) -> Any:
        resolved = self._resolve_sequences(state, set(pinned))
        resolved = self._resolve_nested(resolved)
        return self._materialize(resolved)

    def _resolve_sequences(self, state: Dict[str, Any], pinned: set) -> Dict[str, Any]:
        """Invoke each sequence once and splice mapping results into the fields."""
        resolved: Dict[str, Any] = {}

        for key, value in state.items():
            if kind_of(value) is not ValueKind.SEQUENCE:
                resolved[key] = value
                continue

            result = value()
            if isinstance(result, Mapping):
                resolved.update({k: v for k, v in result.items() if k not in pinned})
            else:
                # Only mapping results name fields; anything else is dropped
                logger.debug(f"Ignoring non-mapping sequence value {result!r} in {type(self).__name__}")

        return resolved

    def _resolve_nested(self, state: Dict[str, Any]) -> Dict[str, Any]:
        resolved: Dict[str, Any] = {}

        for key, value in state.items():
            kind = kind_of(value)
            if kind is ValueKind.DEFERRED:
                resolved[key] = value()
            elif kind is ValueKind.FACTORY:
                logger.debug(f"Resolving nested {type(value).__name__} for '{key}'")
                resolved[key] = value.clone().make()
            else:
                # Literals, and sequences handed back inside a sequence result
                resolved[key] = value

        return resolved

    def _materialize(self, fields: Dict[str, Any]) -> Any:
        name = type(self).__name__
        if self.data_object is None:
            raise ResolutionFailure(f"{name} does not declare a data_object", fields=fields)

        try:
            return self.data_object(**fields)
        except (TypeError, ValueError) as e:
            target = getattr(self.data_object, "__name__", repr(self.data_object))
            logger.error(f"{name} could not build {target}: {e}")
            raise ResolutionFailure(
                f"Cannot build {target} from fields {sorted(fields)}: {e}",
                data_object=self.data_object,
                fields=fields,
            ) from e

    def _reset_sequences(self, state: Dict[str, Any]) -> None:
        logger.debug(f"Resetting sequences in {type(self).__name__}")
        for value in state.values():
            if kind_of(value) is ValueKind.SEQUENCE:
                value.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count}, fields={list(self._state)})"


def _clone_value(value: Any) -> Any:
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        return value.copy()
    if kind is ValueKind.FACTORY:
        return value.clone()
    return value
