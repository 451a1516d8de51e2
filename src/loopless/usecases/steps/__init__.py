from .build_catalog import BuildCatalog
from .build_sieve import BuildSieve
from .emit_call_tree import EmitCallTree
from .optimize_catalog import OptimizeCatalog
from .render_unit import RenderUnit
from .select_targets import SelectTargets
from .verify_unit import VerifyUnit
from .write_output import WriteOutput

__all__ = [
    "BuildCatalog",
    "BuildSieve",
    "EmitCallTree",
    "OptimizeCatalog",
    "RenderUnit",
    "SelectTargets",
    "VerifyUnit",
    "WriteOutput",
]
