"""Scaffold new Vue projects from layered templates.

The package resolves user choices into a :class:`Configuration`, derives an
ordered :class:`RenderPlan` of template directories, renders them into the
target directory while merging ``package.json`` fragments, and finally
post-processes the tree (TypeScript conversion, test pruning).
"""

from __future__ import annotations

from .config import Configuration
from .errors import OperationCancelled, TemplateRenderingError
from .naming import is_valid_package_name, to_valid_package_name
from .plan import RenderPlan, build_render_plan
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer

__all__ = [
    "Configuration",
    "OperationCancelled",
    "ProjectScaffolder",
    "RenderPlan",
    "TemplateRenderer",
    "TemplateRenderingError",
    "build_render_plan",
    "is_valid_package_name",
    "to_valid_package_name",
]

__version__ = "0.1.0"
