"""Pipeline stages for linguistic example export.

Stages, leaves first:
1. stage_context - Resolve the convention governing a node
2. stage_extract - Pull label and judgment out of example text
3. stage_gb4e - gb4e paragraph, item and list renderers
4. stage_linguex - linguex paragraph, item and list renderers
5. stage_default - Generic rendering outside example lists
6. stage_dispatch - Route each node to its renderer

The exporter walks the tree bottom-up and calls dispatch at every node.
"""

from .renderer import ConventionRenderer
from .stage_context import declares_itself, resolve_convention
from .stage_default import DefaultRenderer
from .stage_dispatch import ExampleDispatcher, default_registry
from .stage_extract import AnnotationExtractor, extract
from .stage_gb4e import Gb4eRenderer, resolve_placeholders
from .stage_linguex import LinguexRenderer

__all__ = [
    # Interface
    "ConventionRenderer",
    # Context
    "declares_itself",
    "resolve_convention",
    # Extraction
    "AnnotationExtractor",
    "extract",
    # Conventions
    "Gb4eRenderer",
    "resolve_placeholders",
    "LinguexRenderer",
    # Default
    "DefaultRenderer",
    # Dispatch
    "ExampleDispatcher",
    "default_registry",
]
