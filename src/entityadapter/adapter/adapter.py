"""Entity adapter: state, actions and selectors behind one configuration.

Usage:
    adapter = create_entity_adapter(sort=lambda a, b: (a.name > b.name) - (a.name < b.name))

    store = LocalStore(adapter.get_state())
    actions = adapter.get_actions(store.set_state)
    selectors = adapter.get_selectors()

    actions.add_many(products)
    selectors.select_all(store.get_state())
"""

from __future__ import annotations

from dataclasses import dataclass, field

from entityadapter.adapter.models import AdapterOptions
from entityadapter.config import AdapterSettings
from entityadapter.core.actions import EntityActions, actions_factory
from entityadapter.core.identity import MissingIdHandler, default_id_selector, warn_missing_id
from entityadapter.core.selectors import EntitySelectors, selectors_factory
from entityadapter.core.state import EntityState, create_state
from entityadapter.core.types import IdSelector, SetState, SortOption


@dataclass(frozen=True, slots=True)
class EntityAdapter[E, K]:
    """Configuration holder composing the state, action and selector factories.

    Stateless: snapshots live in whatever store the actions are bound to.

    Attributes:
        id_selector: Resolved id selector shared by every action set.
        sort: Comparer, or None for insertion order.
    """

    id_selector: IdSelector[E, K]
    sort: SortOption[E] = None
    _selectors: EntitySelectors[E, K] = field(
        default_factory=EntitySelectors, repr=False, compare=False
    )

    def get_state(self) -> EntityState[E, K]:
        """Fresh empty state."""
        return create_state()

    def get_actions(self, set_state: SetState[EntityState[E, K]]) -> EntityActions[E, K]:
        """Actions writing through ``set_state`` with this adapter's policy."""
        return actions_factory(set_state, id_selector=self.id_selector, sort=self.sort)

    def get_selectors(self) -> EntitySelectors[E, K]:
        return self._selectors


def create_entity_adapter[E, K](
    options: AdapterOptions[E, K] | None = None,
    *,
    id_selector: IdSelector[E, K] | None = None,
    sort: SortOption[E] = None,
    on_missing_id: MissingIdHandler | None = warn_missing_id,
    settings: AdapterSettings | None = None,
) -> EntityAdapter[E, K]:
    """Create an adapter for a collection of entities.

    Options may be given as an ``AdapterOptions`` or as keyword arguments;
    keyword arguments are ignored when ``options`` is passed.

    Args:
        options: Complete adapter options.
        id_selector: Derives each entity's id. Defaults to the settings' id
            field, reporting entities without one to ``on_missing_id``.
        sort: Comparer defining the ``ids`` order.
        on_missing_id: Diagnostic sink for the default id selector.
        settings: Overrides the environment-loaded settings.

    Returns:
        Configured EntityAdapter.
    """
    if options is None:
        options = AdapterOptions(id_selector=id_selector, sort=sort, on_missing_id=on_missing_id)

    selector = options.id_selector
    if selector is None:
        selector = default_id_selector(options.on_missing_id, settings=settings)

    return EntityAdapter(id_selector=selector, sort=options.comparer)
