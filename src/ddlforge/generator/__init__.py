"""Statement generation pipeline for ddlforge."""

# Import generators to trigger registration
import ddlforge.generator.create_table as _create_table  # noqa: F401
import ddlforge.generator.informix as _informix  # noqa: F401
from ddlforge.generator.base import Diagnostics, GenerationContext, SqlGenerator
from ddlforge.generator.pipeline import GenerationPipeline, GenerationResult
from ddlforge.generator.registry import GeneratorRegistry, NoGeneratorError

__all__ = [
    "Diagnostics",
    "GenerationContext",
    "GenerationPipeline",
    "GenerationResult",
    "GeneratorRegistry",
    "NoGeneratorError",
    "SqlGenerator",
]
