from __future__ import annotations

from dataclasses import dataclass

from loopless.kernel.context import Context
from loopless.observability.logging import StructuredLogger
from loopless.services.optimizer import TieBreak, count_improvements, optimize, total_savings
from loopless.usecases.messages import CatalogReady, OptimizedCatalog


@dataclass(frozen=True, slots=True)
class OptimizeCatalog:
    # Replaces poorly factoring numbers with a cheaper smaller base plus trailing emissions.
    enabled: bool = True
    tie_break: TieBreak = "largest"
    logger: StructuredLogger | None = None

    def __call__(self, msg: CatalogReady, ctx: Context | None) -> list[OptimizedCatalog]:
        # Disabled => the exact catalog is passed through as the chosen one.
        optimized = optimize(msg.local, tie_break=self.tie_break) if self.enabled else msg.local
        improved = count_improvements(msg.local, optimized)
        saved = total_savings(msg.local, optimized)
        if ctx is not None:
            ctx.metric_set("optimizer.improved", improved)
            ctx.metric_set("optimizer.saved_calls", saved)
        if self.logger is not None:
            self.logger.info(
                "catalog optimized",
                max=msg.request.max_n,
                enabled=self.enabled,
                improved=improved,
                saved_calls=saved,
            )
        return [OptimizedCatalog(request=msg.request, local=msg.local, optimized=optimized)]
