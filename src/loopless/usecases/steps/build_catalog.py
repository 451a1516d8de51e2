from __future__ import annotations

from dataclasses import dataclass

from loopless.kernel.context import Context
from loopless.services.catalog import build_catalog
from loopless.usecases.messages import CatalogReady, SieveReady


@dataclass(frozen=True, slots=True)
class BuildCatalog:
    # Exact (merged) factorization cost for every number in 1..max.

    def __call__(self, msg: SieveReady, ctx: Context | None) -> list[CatalogReady]:
        catalog = build_catalog(msg.request.max_n, msg.primes)
        if ctx is not None:
            ctx.metric_set("catalog.size", len(catalog))
        return [CatalogReady(request=msg.request, local=catalog)]
