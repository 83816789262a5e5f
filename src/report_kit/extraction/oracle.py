# src/report_kit/extraction/oracle.py

import logging
from collections.abc import Sequence
from time import monotonic

from report_kit.chunking.chunking import Chunk
from report_kit.errors import OracleError, ParseError
from report_kit.llms.base import LLMClient, Message, Role
from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook
from report_kit.prompts.prompt import Prompt
from report_kit.prompts.prompts_library import PromptsLibrary
from report_kit.records.models import PartialRecord

from .parsing import parse_partial_record

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = ("report_extraction_system", "1.0")
CHUNK_PROMPT = ("report_extraction_chunk", "1.0")


class ExtractionOracle:
    """Asks an LLM for the report fields found in each chunk.

    One attempt per chunk. A chunk whose call or response fails contributes
    an empty PartialRecord; the remaining chunks still run.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        prompts: PromptsLibrary | None = None,
        *,
        max_response_tokens: int = 4000,
        temperature: float = 0.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        prompts = prompts or PromptsLibrary()
        self._llm = llm_client
        self._system_prompt: Prompt = prompts.get(*SYSTEM_PROMPT)
        self._chunk_prompt: Prompt = prompts.get(*CHUNK_PROMPT)
        self._max_response_tokens = max_response_tokens
        self._temperature = temperature
        self.metrics_hook = metrics_hook

    def build_messages(
        self,
        chunk: Chunk,
        *,
        total_chunks: int,
        year: int,
        library_name: str,
    ) -> list[Message]:
        system = self._system_prompt.render(library_name=library_name, year=year)
        user = self._chunk_prompt.render(
            chunk_number=chunk.index + 1,
            total_chunks=total_chunks,
            library_name=library_name,
            year=year,
            text=chunk.text,
        )
        return [
            Message(role=Role.SYSTEM, content=system),
            Message(role=Role.USER, content=user),
        ]

    async def extract_chunk(
        self,
        chunk: Chunk,
        *,
        total_chunks: int,
        year: int,
        library_name: str,
    ) -> PartialRecord:
        """Extract one chunk.

        Raises:
            OracleError: The LLM call failed or returned nothing usable.
            ParseError: The response held no report payload.
        """
        messages = self.build_messages(
            chunk, total_chunks=total_chunks, year=year, library_name=library_name
        )
        try:
            response = await self._llm.complete(
                messages=messages,
                temperature=self._temperature,
                max_tokens=self._max_response_tokens,
            )
        except Exception as exc:
            raise OracleError(f"Extraction call failed: {exc}") from exc

        if response.finish_reason == "error":
            raise OracleError("Extraction call ended with an error finish reason")
        if not response.content:
            raise OracleError("Empty response from extraction service")
        if response.finish_reason == "length":
            logger.warning(
                "Chunk %d response hit the token limit; payload may be truncated",
                chunk.index + 1,
            )

        return parse_partial_record(response.content)

    async def extract_all(
        self,
        chunks: Sequence[Chunk],
        *,
        year: int,
        library_name: str,
    ) -> list[PartialRecord]:
        """Extract every chunk sequentially, in document order.

        Returns one PartialRecord per chunk, in chunk order.
        """
        results: list[PartialRecord] = []
        total = len(chunks)

        for chunk in chunks:
            logger.info("Processing chunk %d of %d", chunk.index + 1, total)
            start = monotonic()
            try:
                record = await self.extract_chunk(
                    chunk, total_chunks=total, year=year, library_name=library_name
                )
            except (OracleError, ParseError) as exc:
                logger.warning(
                    "Skipping chunk %d of %d: %s", chunk.index + 1, total, exc
                )
                self.metrics_hook.increment(names.ORACLE_CHUNKS_FAILED)
                record = PartialRecord()
            else:
                logger.debug(
                    "Chunk %d yielded sections: %s",
                    chunk.index + 1,
                    ", ".join(record.present_sections()) or "none",
                )
                self.metrics_hook.increment(names.ORACLE_CHUNKS_SUCCEEDED)

            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.ORACLE_CHUNK_DURATION, elapsed_ms)
            results.append(record)

        return results
