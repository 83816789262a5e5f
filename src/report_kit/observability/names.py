# src/report_kit/observability/names.py

"""Standard metric names for report_kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Extraction Metrics
# ============================================================================

# Duration
PDF_EXTRACTION_DURATION = "pdf_extraction_duration"
ORACLE_CHUNK_DURATION = "oracle_chunk_duration"

# Counters
ORACLE_CHUNKS_SUCCEEDED = "oracle_chunks_succeeded"
ORACLE_CHUNKS_FAILED = "oracle_chunks_failed"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Merge Metrics
# ============================================================================

MERGE_DURATION = "merge_duration"


# ============================================================================
# Store Metrics (SQLite)
# ============================================================================

# Duration
SQLITE_READ_DURATION = "sqlite_read_duration"
SQLITE_WRITE_DURATION = "sqlite_write_duration"

# Counters
SQLITE_OPERATIONS_TOTAL = "sqlite_operations_total"


# ============================================================================
# Pipeline Metrics
# ============================================================================

# Duration
PIPELINE_RUN_DURATION = "pipeline_run_duration"

# Counters
PIPELINE_RUNS_COMPLETED = "pipeline_runs_completed"
PIPELINE_RUNS_FAILED = "pipeline_runs_failed"
