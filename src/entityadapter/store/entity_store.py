"""Entity store façade: an adapter bound to a live reactive store.

Usage:
    products = create_entity_store(AdapterOptions(sort=by_name))
    products.actions.add_one({"id": "1", "name": "Apple"})
    products.selectors.select_all(products.get_state())

    # Extra state and actions next to the collection
    todos = create_entity_store(
        lambda: {"loading": False},
        lambda set_state, get_state, store: {
            "toggle_loading": lambda: set_state(lambda s: {"loading": not s["loading"]}),
        },
    )
    todos.actions.toggle_loading()
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, overload

from entityadapter.adapter import AdapterOptions, EntityAdapter, create_entity_adapter
from entityadapter.core.actions import EntityActions
from entityadapter.core.selectors import EntitySelectors
from entityadapter.storage.local import LocalStore
from entityadapter.storage.protocol import Listener, Unsubscribe

type StoreState = dict[str, Any]
type ExtraStateCreator = Callable[[], Mapping[str, Any]]
type ActionsCreator = Callable[
    [Callable[..., None], Callable[[], StoreState], LocalStore[StoreState]],
    Mapping[str, Callable[..., Any]],
]
type OptionsArg = AdapterOptions[Any, Any] | Mapping[str, Any]


class StoreActions[E, K]:
    """Entity actions plus caller-supplied extra actions.

    Extra actions take precedence over entity actions of the same name.
    """

    __slots__ = ("_entity_actions", "_extra")

    def __init__(
        self,
        entity_actions: EntityActions[E, K],
        extra: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self._entity_actions = entity_actions
        self._extra = dict(extra or {})

    @property
    def extra(self) -> Mapping[str, Callable[..., Any]]:
        return self._extra

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the instance itself.
        extra = object.__getattribute__(self, "_extra")
        if name in extra:
            return extra[name]
        return getattr(object.__getattribute__(self, "_entity_actions"), name)

    def __dir__(self) -> list[str]:
        return sorted(set(dir(self._entity_actions)) | set(self._extra))


class EntityStore[E, K]:
    """Live normalized collection: a LocalStore wired to an EntityAdapter.

    Attributes:
        adapter: The adapter whose policy the actions follow.
        actions: Entity actions merged with any extra actions.
        selectors: Pure projections over snapshots of this store.
    """

    def __init__(
        self,
        adapter: EntityAdapter[E, K],
        state_creator: ExtraStateCreator | None = None,
        actions_creator: ActionsCreator | None = None,
    ) -> None:
        initial: StoreState = {**adapter.get_state()}
        if state_creator is not None:
            initial.update(state_creator())

        self.adapter = adapter
        self._store: LocalStore[StoreState] = LocalStore(initial)

        extra = None
        if actions_creator is not None:
            extra = actions_creator(self._store.set_state, self._store.get_state, self._store)

        self.actions: StoreActions[E, K] = StoreActions(
            adapter.get_actions(self._store.set_state), extra
        )
        self.selectors: EntitySelectors[E, K] = adapter.get_selectors()

    @property
    def store(self) -> LocalStore[StoreState]:
        """The underlying reactive store."""
        return self._store

    def get_state(self) -> StoreState:
        return self._store.get_state()

    def get_initial_state(self) -> StoreState:
        return self._store.get_initial_state()

    def set_state(
        self,
        partial: Mapping[str, Any] | Callable[[StoreState], Mapping[str, Any]],
        replace: bool = False,
    ) -> None:
        self._store.set_state(partial, replace)

    def subscribe(self, listener: Listener[StoreState]) -> Unsubscribe:
        return self._store.subscribe(listener)

    def select[T](self, selector: Callable[[StoreState], T]) -> T:
        """Apply a selector to the current snapshot."""
        return selector(self._store.get_state())


def _resolve_options(options: OptionsArg | None) -> AdapterOptions[Any, Any] | None:
    if options is None or isinstance(options, AdapterOptions):
        return options
    if isinstance(options, Mapping):
        return AdapterOptions.from_mapping(options)
    raise TypeError(f"Expected AdapterOptions or mapping, got {type(options).__name__}")


def _parse_arguments(
    options_or_state_creator: OptionsArg | ExtraStateCreator | None,
    state_creator_or_actions_creator: ExtraStateCreator | ActionsCreator | None,
    maybe_actions_creator: ActionsCreator | None,
) -> tuple[AdapterOptions[Any, Any] | None, ExtraStateCreator | None, ActionsCreator | None]:
    """Resolve the positional forms accepted by ``create_entity_store``.

    A callable first argument is the extra state creator and shifts the
    remaining arguments left.

    Raises:
        TypeError: If the argument shapes do not match any supported form.
    """
    if callable(options_or_state_creator):
        if maybe_actions_creator is not None:
            raise TypeError("Too many arguments: got a state creator and two more callables")
        return None, options_or_state_creator, state_creator_or_actions_creator  # type: ignore[return-value]

    if maybe_actions_creator is not None and state_creator_or_actions_creator is None:
        raise TypeError("An actions creator requires a state creator")

    return (
        _resolve_options(options_or_state_creator),
        state_creator_or_actions_creator,  # type: ignore[return-value]
        maybe_actions_creator,
    )


@overload
def create_entity_store(options: OptionsArg | None = None) -> EntityStore[Any, Any]: ...


@overload
def create_entity_store(
    state_creator: ExtraStateCreator,
    actions_creator: ActionsCreator | None = None,
) -> EntityStore[Any, Any]: ...


@overload
def create_entity_store(
    options: OptionsArg,
    state_creator: ExtraStateCreator,
    actions_creator: ActionsCreator | None = None,
) -> EntityStore[Any, Any]: ...


def create_entity_store(
    options_or_state_creator: OptionsArg | ExtraStateCreator | None = None,
    state_creator_or_actions_creator: ExtraStateCreator | ActionsCreator | None = None,
    maybe_actions_creator: ActionsCreator | None = None,
) -> EntityStore[Any, Any]:
    """Create a live entity store.

    Supports these forms:
        create_entity_store()
        create_entity_store(options)
        create_entity_store(state_creator)
        create_entity_store(state_creator, actions_creator)
        create_entity_store(options, state_creator)
        create_entity_store(options, state_creator, actions_creator)

    Args:
        options_or_state_creator: ``AdapterOptions`` (or a mapping of them), or
            the extra state creator.
        state_creator_or_actions_creator: Extra state creator after options,
            otherwise the actions creator.
        maybe_actions_creator: Actions creator after options and state creator.
            Called with ``(set_state, get_state, store)``; returns a mapping of
            extra actions.

    Returns:
        EntityStore seeded with the empty collection merged with the extra state.

    Raises:
        TypeError: If the arguments match none of the supported forms.
    """
    options, state_creator, actions_creator = _parse_arguments(
        options_or_state_creator,
        state_creator_or_actions_creator,
        maybe_actions_creator,
    )
    adapter: EntityAdapter[Any, Any] = create_entity_adapter(options)
    return EntityStore(adapter, state_creator, actions_creator)
