"""Constants for pymaxmatch - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "pymaxmatch"

# Execution strategies for chunk dispatch. Both produce identical tokens.
STRATEGIES = ("sequential", "parallel")

# Default configuration
# Structure: {"strategy": "parallel", "max_workers": None}
# Keys: strategy (dispatch mode), max_workers (thread pool size, None = auto)
DEFAULT_CONFIG = {
    # Options: sequential, parallel
    "strategy": "parallel",
    # Worker threads for the parallel strategy
    "max_workers": None,
}

# Word list encoding when none is given
DEFAULT_ENCODING = "utf-8"

# Hugging Face Hub defaults for hosted word lists
HF_REPO_TYPE = "dataset"
HF_WORDLIST_FILENAME = "words.txt"
