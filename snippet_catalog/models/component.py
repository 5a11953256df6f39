# snippet_catalog/models/component.py
from typing import Optional, List
from .base import CatalogModel

class ComponentCreate(CatalogModel):
    """Fields a caller supplies to create a component"""
    name: str
    description: Optional[str] = None
    html: str
    css: str
    js: str
    category_id: int
    tags: Optional[List[str]] = None

class ComponentUpdate(CatalogModel):
    """Partial update of a component; only the fields that were set apply"""
    name: Optional[str] = None
    description: Optional[str] = None
    html: Optional[str] = None
    css: Optional[str] = None
    js: Optional[str] = None
    category_id: Optional[int] = None
    tags: Optional[List[str]] = None
    is_active: Optional[bool] = None

class Component(CatalogModel):
    """Reusable HTML/CSS/JS snippet"""
    id: int
    name: str
    description: Optional[str] = None
    html: str
    css: str
    js: str
    category_id: int
    tags: Optional[List[str]] = None

    # Soft-delete flag, False once the component has been deleted
    is_active: bool = True
