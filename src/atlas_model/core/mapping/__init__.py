# src/atlas_model/core/mapping/__init__.py
from .mapper import CollectionSpec, Mapper

__all__ = ["CollectionSpec", "Mapper"]
