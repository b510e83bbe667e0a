"""RnoteSight scene engine."""

from rnotesight.engine.registry import builder, get_registry
from rnotesight.engine.bounds import BoundingBox
from rnotesight.engine.builder import BuildContext, build_element
from rnotesight.engine.assembler import assemble_scene, render, try_render

__all__ = [
    "builder",
    "get_registry",
    "BoundingBox",
    "BuildContext",
    "build_element",
    "assemble_scene",
    "render",
    "try_render",
]
