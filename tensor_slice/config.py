DEBUG_SLICE = False
DEBUG_EXECUTION = False
DEBUG_DETAILED = False

# If True, kernels collapse trailing unsliced axes into a single contiguous block.
# Only the copy granularity changes, never the output.
ENABLE_FLATTENING = True

# Element types accepted for runtime starts/ends/axes/steps inputs.
# Values are widened to int64 before normalization.
SUPPORTED_INDEX_DTYPES = ("int32", "int64")
