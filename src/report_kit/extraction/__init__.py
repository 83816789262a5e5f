from .oracle import CHUNK_PROMPT, SYSTEM_PROMPT, ExtractionOracle
from .parsing import find_payload, iter_json_objects, parse_partial_record

__all__ = [
    "CHUNK_PROMPT",
    "SYSTEM_PROMPT",
    "ExtractionOracle",
    "find_payload",
    "iter_json_objects",
    "parse_partial_record",
]
