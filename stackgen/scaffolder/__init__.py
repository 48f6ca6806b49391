"""stackgen scaffolder: writes the boilerplate tree for the chosen stack.

The template catalog picks a fixed list of files from the two interactive
answers; ``ProjectGenerator`` copies each packaged asset verbatim to its
place under the output directory.

Quick usage::

    from stackgen.scaffolder import GenerationConfig, ProjectGenerator, Stack

    config = GenerationConfig(stack=Stack.NEXTJS, needs_database=True)
    result = await ProjectGenerator(include_auth=False).generate(config, "project")
"""

from stackgen.scaffolder.catalog import (
    CatalogError,
    TemplateEntry,
    TemplateGroup,
    select_groups,
    select_templates,
)
from stackgen.scaffolder.generator import EmitResult, ProjectGenerator
from stackgen.scaffolder.models import GenerationConfig, Stack
from stackgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "CatalogError",
    "EmitResult",
    "GenerationConfig",
    "ProjectGenerator",
    "Stack",
    "TemplateEntry",
    "TemplateGroup",
    "TemplateRenderer",
    "select_groups",
    "select_templates",
]
