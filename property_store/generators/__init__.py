"""Synthetic data generators."""

from property_store.generators.base import BaseGenerator
from property_store.generators.property import PropertyGenerator

__all__ = ["BaseGenerator", "PropertyGenerator"]
