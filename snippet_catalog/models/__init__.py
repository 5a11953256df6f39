"""Catalog record models"""
from .base import CatalogModel
from .category import Category, CategoryCreate
from .component import Component, ComponentCreate, ComponentUpdate

__all__ = [
    'CatalogModel',
    'Category',
    'CategoryCreate',
    'Component',
    'ComponentCreate',
    'ComponentUpdate',
]
