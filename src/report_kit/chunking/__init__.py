from .chunking import (
    DEFAULT_CHARS_PER_TOKEN,
    DEFAULT_MAX_TOKENS,
    Chunk,
    chunk_text,
    estimate_tokens,
    split_paragraphs,
)

__all__ = [
    "DEFAULT_CHARS_PER_TOKEN",
    "DEFAULT_MAX_TOKENS",
    "Chunk",
    "chunk_text",
    "estimate_tokens",
    "split_paragraphs",
]
