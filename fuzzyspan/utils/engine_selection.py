"""Distance backend selection for fuzzyspan.

This module picks the implementation that evaluates a single edit distance.
Both backends return identical values; the choice only affects speed.

Backend Selection Logic:
- If requested is "python" → pure-Python row-reduced dynamic programming
- If requested is "rapidfuzz" → rapidfuzz's Levenshtein implementation
- If requested is "auto" → rapidfuzz once the DP table reaches the cell threshold,
  python below it (tiny inputs are cheaper without the extension call)
- Log the decision with its reasoning at DEBUG level
"""

import logging

logger = logging.getLogger(__name__)

BACKENDS = ("python", "rapidfuzz")

# n * m cells of the DP table at which "auto" switches to rapidfuzz
DEFAULT_THRESHOLD_CELLS = 64


def choose_backend(
    n: int,
    m: int,
    requested: str = "auto",
    threshold: int = DEFAULT_THRESHOLD_CELLS,
) -> str:
    """Choose the distance backend for one pair of operands.

    Args:
        n: Length of the first operand in code points
        m: Length of the second operand in code points
        requested: Requested backend ("auto", "python" or "rapidfuzz")
        threshold: DP table size at which "auto" prefers rapidfuzz

    Returns:
        Selected backend name ("python" or "rapidfuzz")

    Raises:
        ValueError: If the requested backend is not recognized.

    """
    requested = (requested or "auto").lower()
    cells = n * m
    size_reason = f"cells={cells} threshold={threshold}"

    if requested == "python":
        chosen = "python"
        reason = f"chosen=python | requested=python | {size_reason}"
    elif requested == "rapidfuzz":
        chosen = "rapidfuzz"
        reason = f"chosen=rapidfuzz | requested=rapidfuzz | {size_reason}"
    elif requested == "auto":
        if cells >= threshold:
            chosen = "rapidfuzz"
            reason = f"chosen=rapidfuzz | requested=auto | {size_reason} | auto_selected=above_threshold"
        else:
            chosen = "python"
            reason = f"chosen=python | requested=auto | {size_reason} | auto_selected=below_threshold"
    else:
        raise ValueError(
            f"Unknown distance backend: '{requested}'. "
            f"Valid options: {sorted(BACKENDS + ('auto',))}"
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"engine_selection | {reason}")

    return chosen
