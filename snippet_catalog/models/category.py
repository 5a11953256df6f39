# snippet_catalog/models/category.py
from typing import Optional
from .base import CatalogModel

class CategoryCreate(CatalogModel):
    """Fields a caller supplies to create a category"""
    name: str
    icon: str
    description: Optional[str] = None

class Category(CatalogModel):
    """Category model grouping UI components"""
    id: int
    name: str
    icon: str
    description: Optional[str] = None

    # Cached number of active components in this category
    component_count: int = 0
