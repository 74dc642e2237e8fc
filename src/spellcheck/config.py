import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent
DATA_DIR = os.environ.get("SPELLCHECK_DATA_DIR", str(BASE_DIR / "data"))
DICTIONARY_PATH = os.environ.get("SPELLCHECK_DICTIONARY_PATH", str(Path(DATA_DIR) / "words.txt"))
STRATEGY = os.environ.get("SPELLCHECK_STRATEGY", "permutation")

# 0 disables the guard
MAX_CANDIDATES = int(os.environ.get("SPELLCHECK_MAX_CANDIDATES", "2000000"))
MAX_WORD_LENGTH = int(os.environ.get("SPELLCHECK_MAX_WORD_LENGTH", "64"))

LOG_LEVEL = os.environ.get("SPELLCHECK_LOG_LEVEL", "INFO")
API_BASE = os.environ.get("SPELLCHECK_API_BASE", "http://localhost:8000")
