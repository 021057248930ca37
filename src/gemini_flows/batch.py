"""Fan-out of prompt variants through one generation client.

All variants are issued concurrently and the results come back in input
order. A failed variant never affects its siblings because the client
returns failures instead of raising.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
import logging
from typing import TYPE_CHECKING, Any

from gemini_flows.core.types import BatchJob, GenerationRequest, GenerationResult
from gemini_flows.telemetry import TelemetryContext

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient
    from gemini_flows.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)


class BatchRunner:
    """Run several prompts concurrently, optionally capping in-flight calls."""

    def __init__(
        self,
        client: GenerationClient,
        *,
        max_concurrency: int | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1 when provided")
        self.client = client
        self.max_concurrency = max_concurrency
        self.tele = telemetry or TelemetryContext()

    async def run_batch(
        self,
        prompts: Sequence[str],
        parameters: Mapping[str, Any] | None = None,
    ) -> list[GenerationResult]:
        """Generate one result per prompt; ``result[i]`` belongs to ``prompts[i]``."""
        if not prompts:
            return []

        params = dict(parameters or {})
        requests = [GenerationRequest(prompt=p, parameters=params) for p in prompts]
        # One semaphore per batch so separate batches don't throttle each other
        semaphore = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        )

        async def _run_one(request: GenerationRequest) -> GenerationResult:
            if semaphore is None:
                return await self.client.generate(request)
            async with semaphore:
                return await self.client.generate(request)

        log.debug(
            "Fanning out %d prompts (max_concurrency=%s)",
            len(requests),
            self.max_concurrency,
        )
        with self.tele("batch.run_batch", size=len(requests)):
            results = await asyncio.gather(*(_run_one(r) for r in requests))

        failures = sum(1 for r in results if r.kind == "failure")
        if failures:
            log.info("Batch finished with %d/%d failures", failures, len(results))
        self.tele.gauge("batch.failures", failures)
        return list(results)

    async def run_job(
        self, job: BatchJob, parameters: Mapping[str, Any] | None = None
    ) -> list[GenerationResult]:
        return await self.run_batch(job.variant_prompts, parameters)
