"""
Storage interface - the contract both catalog stores implement.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Union

from ..models import Category, CategoryCreate, Component, ComponentCreate, ComponentUpdate

# Component fields that may be cleared to NULL by an update
NULLABLE_COMPONENT_FIELDS = frozenset({'description', 'tags'})


def matches_query(component: Component, query: str) -> bool:
    """Case-insensitive substring match over name, description and tags.

    An empty query matches every component.
    """
    term = query.lower()
    if term in component.name.lower():
        return True
    if component.description and term in component.description.lower():
        return True
    return any(term in tag.lower() for tag in component.tags or [])


def update_fields(updates: Union[ComponentUpdate, Mapping[str, Any]]) -> Dict[str, Any]:
    """Normalize a partial component update to a dict of snake_case fields.

    Accepts snake_case or camelCase keys. ``id`` and unknown keys are
    dropped, and so is ``None`` for fields that cannot be NULL.
    """
    if not isinstance(updates, ComponentUpdate):
        updates = ComponentUpdate.model_validate(dict(updates))
    fields = updates.model_dump(exclude_unset=True)
    return {
        key: value for key, value in fields.items()
        if value is not None or key in NULLABLE_COMPONENT_FIELDS
    }


class Storage(ABC):
    """Abstract interface for catalog storage.

    Lookups signal absence with ``None``, ``False`` or an empty list and
    never raise for an unknown id. Input is expected to be validated by the
    caller. Every returned record is a copy owned by the caller.
    """

    # Category operations
    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """List all categories."""

    @abstractmethod
    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by ID."""

    @abstractmethod
    async def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get the first category (lowest ID) with exactly this name."""

    @abstractmethod
    async def create_category(self, category: CategoryCreate) -> Category:
        """Create a category with a zero component count."""

    @abstractmethod
    async def update_category_component_count(self, category_id: int, count: int) -> None:
        """Set the cached component count; no-op for an unknown category."""

    @abstractmethod
    async def refresh_category_component_count(self, category_id: int) -> int:
        """Recount the active components of a category, store and return it."""

    @abstractmethod
    async def recalculate_component_counts(self) -> Dict[int, int]:
        """Refresh the cached count of every category.

        Returns:
            Mapping of category ID to its refreshed count
        """

    # Component operations
    @abstractmethod
    async def get_components(self) -> List[Component]:
        """List active components."""

    @abstractmethod
    async def get_components_by_category(self, category_id: int) -> List[Component]:
        """List active components of one category."""

    @abstractmethod
    async def get_component_by_id(self, component_id: int) -> Optional[Component]:
        """Get a component by ID, including soft-deleted ones."""

    @abstractmethod
    async def create_component(self, component: ComponentCreate) -> Component:
        """Create an active component and refresh its category count."""

    @abstractmethod
    async def update_component(
        self,
        component_id: int,
        updates: Union[ComponentUpdate, Mapping[str, Any]]
    ) -> Optional[Component]:
        """
        Merge a partial update onto a component.

        Category counts are not recomputed here, even when ``category_id``
        or ``is_active`` change. Call ``refresh_category_component_count``
        for the affected categories (or ``recalculate_component_counts``)
        after such an update.

        Returns:
            The updated component, or None if the ID is unknown
        """

    @abstractmethod
    async def delete_component(self, component_id: int) -> bool:
        """
        Soft-delete a component and refresh its category count.

        Returns:
            True if the component exists (also when already deleted),
            False for an unknown ID
        """

    @abstractmethod
    async def search_components(self, query: str) -> List[Component]:
        """Active components whose name, description or tags contain query."""
