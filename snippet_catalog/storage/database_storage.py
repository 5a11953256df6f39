"""
PostgreSQL catalog storage on top of an asyncpg pool.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..database.database import Database
from ..models import Category, CategoryCreate, Component, ComponentCreate, ComponentUpdate
from .interface import Storage, matches_query, update_fields

# Columns an update may write, in the order they appear in SET clauses
UPDATABLE_COMPONENT_COLUMNS = (
    'name', 'description', 'html', 'css', 'js', 'category_id', 'tags', 'is_active'
)


class DatabaseStorage(Storage):
    """Database-backed storage implementation.

    A component insert or soft delete, the recount of its category and the
    count write run in one transaction on one connection.
    """

    def __init__(self, db: Database):
        self.db = db
        self.logger = logging.getLogger(__name__)

    @staticmethod
    async def _refresh_count(conn, category_id: int) -> int:
        count = await conn.fetchval("""
            SELECT COUNT(*)
            FROM components
            WHERE category_id = $1 AND is_active = true
        """, category_id)
        await conn.execute("""
            UPDATE categories
            SET component_count = $1
            WHERE id = $2
        """, count, category_id)
        return count

    # Category operations
    async def get_categories(self) -> List[Category]:
        """List all categories"""
        async with self.db.acquire() as conn:
            categories = await conn.fetch("""
                SELECT *
                FROM categories
                ORDER BY id
            """)
            return [Category.model_validate(dict(c)) for c in categories]

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by ID"""
        async with self.db.acquire() as conn:
            category = await conn.fetchrow("""
                SELECT *
                FROM categories
                WHERE id = $1
            """, category_id)
            return Category.model_validate(dict(category)) if category else None

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get the first category with this exact name"""
        async with self.db.acquire() as conn:
            category = await conn.fetchrow("""
                SELECT *
                FROM categories
                WHERE name = $1
                ORDER BY id
                LIMIT 1
            """, name)
            return Category.model_validate(dict(category)) if category else None

    async def create_category(self, category: CategoryCreate) -> Category:
        """Create a category with a zero component count"""
        async with self.db.acquire() as conn:
            row = await conn.fetchrow("""
                INSERT INTO categories (name, icon, description, component_count)
                VALUES ($1, $2, $3, 0)
                RETURNING *
            """,
                category.name,
                category.icon,
                category.description or None
            )
            self.logger.info(f"Created category {row['id']}: {row['name']}")
            return Category.model_validate(dict(row))

    async def update_category_component_count(self, category_id: int, count: int) -> None:
        """Set the cached component count of a category"""
        async with self.db.acquire() as conn:
            await conn.execute("""
                UPDATE categories
                SET component_count = $1
                WHERE id = $2
            """, count, category_id)

    async def refresh_category_component_count(self, category_id: int) -> int:
        """Recount active components of one category"""
        async with self.db.acquire() as conn:
            async with conn.transaction():
                count = await self._refresh_count(conn, category_id)
        self.logger.debug(f"Category {category_id} component count refreshed to {count}")
        return count

    async def recalculate_component_counts(self) -> Dict[int, int]:
        """Recount active components of every category"""
        async with self.db.acquire() as conn:
            rows = await conn.fetch("""
                UPDATE categories c
                SET component_count = (
                    SELECT COUNT(*)
                    FROM components p
                    WHERE p.category_id = c.id AND p.is_active = true
                )
                RETURNING c.id, c.component_count
            """)
            counts = {row['id']: row['component_count'] for row in rows}
        self.logger.info(f"Recalculated component counts for {len(counts)} categories")
        return counts

    # Component operations
    async def get_components(self) -> List[Component]:
        """List active components"""
        async with self.db.acquire() as conn:
            components = await conn.fetch("""
                SELECT *
                FROM components
                WHERE is_active = true
                ORDER BY id
            """)
            return [Component.model_validate(dict(c)) for c in components]

    async def get_components_by_category(self, category_id: int) -> List[Component]:
        """List active components of one category"""
        async with self.db.acquire() as conn:
            components = await conn.fetch("""
                SELECT *
                FROM components
                WHERE category_id = $1 AND is_active = true
                ORDER BY id
            """, category_id)
            return [Component.model_validate(dict(c)) for c in components]

    async def get_component_by_id(self, component_id: int) -> Optional[Component]:
        """Get a component by ID, deleted ones included"""
        async with self.db.acquire() as conn:
            component = await conn.fetchrow("""
                SELECT *
                FROM components
                WHERE id = $1
            """, component_id)
            return Component.model_validate(dict(component)) if component else None

    async def create_component(self, component: ComponentCreate) -> Component:
        """Insert an active component and refresh its category count"""
        async with self.db.acquire() as conn:
            async with conn.transaction():
                row = await conn.fetchrow("""
                    INSERT INTO components (
                        name, description, html, css, js, category_id, tags, is_active
                    ) VALUES ($1, $2, $3, $4, $5, $6, $7, true)
                    RETURNING *
                """,
                    component.name,
                    component.description or None,
                    component.html,
                    component.css,
                    component.js,
                    component.category_id,
                    list(component.tags) if component.tags else None
                )
                count = await self._refresh_count(conn, row['category_id'])

        self.logger.info(
            f"Created component {row['id']}: {row['name']} "
            f"(category {row['category_id']} now has {count})"
        )
        return Component.model_validate(dict(row))

    async def update_component(
        self,
        component_id: int,
        updates: Union[ComponentUpdate, Mapping[str, Any]]
    ) -> Optional[Component]:
        """Merge a partial update; category counts are not recomputed"""
        fields = update_fields(updates)

        query_parts = []
        params = []
        param_count = 1

        for column in UPDATABLE_COMPONENT_COLUMNS:
            if column in fields:
                query_parts.append(f"{column} = ${param_count}")
                params.append(fields[column])
                param_count += 1

        if not query_parts:
            return await self.get_component_by_id(component_id)

        params.append(component_id)
        query = f"""
            UPDATE components
            SET {', '.join(query_parts)}
            WHERE id = ${param_count}
            RETURNING *
        """

        async with self.db.acquire() as conn:
            row = await conn.fetchrow(query, *params)
            return Component.model_validate(dict(row)) if row else None

    async def delete_component(self, component_id: int) -> bool:
        """Soft-delete a component and refresh its category count"""
        async with self.db.acquire() as conn:
            async with conn.transaction():
                category_id = await conn.fetchval("""
                    UPDATE components
                    SET is_active = false
                    WHERE id = $1
                    RETURNING category_id
                """, component_id)
                if category_id is None:
                    return False

                count = await self._refresh_count(conn, category_id)

        self.logger.info(
            f"Deleted component {component_id} "
            f"(category {category_id} now has {count})"
        )
        return True

    async def search_components(self, query: str) -> List[Component]:
        """Active components matching the query"""
        components = await self.get_components()
        return [c for c in components if matches_query(c, query)]
