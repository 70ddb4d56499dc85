from pathlib import Path

import pytest

from pymaxmatch.constants import STRATEGIES
from pymaxmatch.tokenizer_config import TokenizerConfig

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def th_wordlist() -> Path:
    return DATA_DIR / "th.txt"


@pytest.fixture
def th_words(th_wordlist) -> list[str]:
    return th_wordlist.read_text(encoding="utf-8").split()


@pytest.fixture(params=STRATEGIES)
def config(request) -> TokenizerConfig:
    """Run the test once per dispatch strategy."""
    return TokenizerConfig(strategy=request.param, max_workers=4)
