"""
In-memory catalog storage.

Records live in two dicts for the lifetime of the process and are lost on
restart. Used when no database is configured.
"""
import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..models import Category, CategoryCreate, Component, ComponentCreate, ComponentUpdate
from .interface import Storage, matches_query, update_fields
from .seed_data import DEMO_SEED, SeedData


class MemoryStorage(Storage):
    """Dict-backed storage implementation.

    Returned records are deep copies, so callers cannot alter the stored
    ones. Component mutations and the category count refresh that follows
    them share one lock.
    """

    def __init__(self, seed: Optional[SeedData] = DEMO_SEED):
        self.logger = logging.getLogger(__name__)
        self._categories: Dict[int, Category] = {}
        self._components: Dict[int, Component] = {}
        self._current_category_id = 1
        self._current_component_id = 1
        self._lock = asyncio.Lock()

        if seed is not None:
            self._load_seed(seed)

    def _load_seed(self, seed: SeedData) -> None:
        """Insert seed records and derive the category counts from them"""
        for category in seed.categories:
            self._insert_category(category)
        for component in seed.components:
            self._insert_component(component)
        for category_id in self._categories:
            self._set_count(category_id, self._count_active(category_id))

        self.logger.info(
            f"Seeded memory storage with {len(seed.categories)} categories "
            f"and {len(seed.components)} components"
        )

    def _insert_category(self, data: CategoryCreate) -> Category:
        category_id = self._current_category_id
        self._current_category_id += 1
        category = Category(
            id=category_id,
            name=data.name,
            icon=data.icon,
            description=data.description or None,
            component_count=0,
        )
        self._categories[category_id] = category
        return category

    def _insert_component(self, data: ComponentCreate) -> Component:
        component_id = self._current_component_id
        self._current_component_id += 1
        component = Component(
            id=component_id,
            name=data.name,
            description=data.description or None,
            html=data.html,
            css=data.css,
            js=data.js,
            category_id=data.category_id,
            tags=list(data.tags) if data.tags else None,
            is_active=True,
        )
        self._components[component_id] = component
        return component

    def _active_components(self) -> List[Component]:
        return [c for c in self._components.values() if c.is_active]

    def _count_active(self, category_id: int) -> int:
        return sum(1 for c in self._active_components() if c.category_id == category_id)

    def _set_count(self, category_id: int, count: int) -> None:
        category = self._categories.get(category_id)
        if category:
            category.component_count = count

    def _refresh_count(self, category_id: int) -> int:
        count = self._count_active(category_id)
        self._set_count(category_id, count)
        self.logger.debug(f"Category {category_id} component count refreshed to {count}")
        return count

    @staticmethod
    def _copy(record):
        return record.model_copy(deep=True) if record else None

    # Category operations
    async def get_categories(self) -> List[Category]:
        """List all categories"""
        return [self._copy(c) for c in self._categories.values()]

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by ID"""
        return self._copy(self._categories.get(category_id))

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get the first category with this exact name"""
        category = next((c for c in self._categories.values() if c.name == name), None)
        return self._copy(category)

    async def create_category(self, category: CategoryCreate) -> Category:
        """Create a category with a zero component count"""
        return self._copy(self._insert_category(category))

    async def update_category_component_count(self, category_id: int, count: int) -> None:
        """Set the cached component count of a category"""
        self._set_count(category_id, count)

    async def refresh_category_component_count(self, category_id: int) -> int:
        """Recount active components of one category"""
        async with self._lock:
            return self._refresh_count(category_id)

    async def recalculate_component_counts(self) -> Dict[int, int]:
        """Recount active components of every category"""
        async with self._lock:
            return {category_id: self._refresh_count(category_id) for category_id in self._categories}

    # Component operations
    async def get_components(self) -> List[Component]:
        """List active components"""
        return [self._copy(c) for c in self._active_components()]

    async def get_components_by_category(self, category_id: int) -> List[Component]:
        """List active components of one category"""
        return [
            self._copy(c) for c in self._active_components()
            if c.category_id == category_id
        ]

    async def get_component_by_id(self, component_id: int) -> Optional[Component]:
        """Get a component by ID, deleted ones included"""
        return self._copy(self._components.get(component_id))

    async def create_component(self, component: ComponentCreate) -> Component:
        """Insert an active component and refresh its category count"""
        async with self._lock:
            created = self._insert_component(component)
            count = self._refresh_count(created.category_id)

        self.logger.info(
            f"Created component {created.id}: {created.name} "
            f"(category {created.category_id} now has {count})"
        )
        return self._copy(created)

    async def update_component(
        self,
        component_id: int,
        updates: Union[ComponentUpdate, Mapping[str, Any]]
    ) -> Optional[Component]:
        """Merge a partial update; category counts are not recomputed"""
        fields = update_fields(updates)
        async with self._lock:
            component = self._components.get(component_id)
            if not component:
                return None

            updated = Component.model_validate({**component.model_dump(), **fields})
            self._components[component_id] = updated
            return self._copy(updated)

    async def delete_component(self, component_id: int) -> bool:
        """Soft-delete a component and refresh its category count"""
        async with self._lock:
            component = self._components.get(component_id)
            if not component:
                return False

            component.is_active = False
            count = self._refresh_count(component.category_id)

        self.logger.info(
            f"Deleted component {component_id} "
            f"(category {component.category_id} now has {count})"
        )
        return True

    async def search_components(self, query: str) -> List[Component]:
        """Active components matching the query"""
        return [self._copy(c) for c in self._active_components() if matches_query(c, query)]
