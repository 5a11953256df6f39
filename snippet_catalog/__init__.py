"""Catalog of reusable HTML/CSS/JS UI components grouped into categories."""

__version__ = "0.1.0"
