import re
from dataclasses import dataclass
from time import monotonic

from report_kit.observability import names
from report_kit.observability.base import MetricsHook, NoOpMetricsHook

DEFAULT_MAX_TOKENS = 50_000
DEFAULT_CHARS_PER_TOKEN = 4

# A blank line, possibly holding whitespace, separates paragraphs.
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class Chunk:
    index: int
    text: str
    offset_start: int
    offset_end: int


def estimate_tokens(text: str, chars_per_token: int = DEFAULT_CHARS_PER_TOKEN) -> int:
    """Rough token count: one token per `chars_per_token` characters."""
    return -(-len(text) // chars_per_token)


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs, each keeping its trailing separator.

    Joining the result gives back `text` unchanged.
    """
    pieces = []
    position = 0
    for match in PARAGRAPH_BREAK.finditer(text):
        pieces.append(text[position : match.end()])
        position = match.end()
    if position < len(text):
        pieces.append(text[position:])
    return pieces


def chunk_text(
    text: str,
    *,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    chars_per_token: int = DEFAULT_CHARS_PER_TOKEN,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    """Pack whole paragraphs into chunks of at most `max_tokens` estimated tokens.

    A paragraph larger than the budget on its own becomes a single
    oversized chunk; paragraphs are never cut. Always returns at least
    one chunk.
    """
    start = monotonic()
    if max_tokens <= 0:
        raise ValueError("max_tokens must be > 0")
    if chars_per_token <= 0:
        raise ValueError("chars_per_token must be > 0")

    max_chars = max_tokens * chars_per_token
    texts: list[str] = []
    current = ""

    for paragraph in split_paragraphs(text):
        if current and len(current) + len(paragraph) > max_chars:
            texts.append(current)
            current = paragraph
        else:
            current += paragraph

    if current or not texts:
        texts.append(current)

    chunks = []
    offset = 0
    for index, chunk_body in enumerate(texts):
        chunks.append(
            Chunk(
                index=index,
                text=chunk_body,
                offset_start=offset,
                offset_end=offset + len(chunk_body),
            )
        )
        offset += len(chunk_body)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    return chunks
