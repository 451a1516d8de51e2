from __future__ import annotations

from dataclasses import dataclass

from loopless.domain.errors import InvalidRangeError
from loopless.kernel.context import Context
from loopless.observability.logging import StructuredLogger
from loopless.ports.sieve_builder import SieveBuilder
from loopless.usecases.messages import GenerationRequest, SieveReady


@dataclass(frozen=True, slots=True)
class BuildSieve:
    # Builds the prime table once per request; every later stage reads it.
    sieve_builder: SieveBuilder
    logger: StructuredLogger | None = None

    def __call__(self, msg: GenerationRequest, ctx: Context | None) -> list[SieveReady]:
        if msg.max_n < 1:
            raise InvalidRangeError(f"nothing to generate for max={msg.max_n}")
        primes = self.sieve_builder.build(msg.max_n)
        if ctx is not None:
            ctx.metric_set("sieve.primes", len(primes))
        if self.logger is not None:
            self.logger.debug("sieve built", max=msg.max_n, primes=len(primes), builder=type(self.sieve_builder).__name__)
        return [SieveReady(request=msg, primes=primes)]
