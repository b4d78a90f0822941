import os
from pathlib import Path

# --- Path Configuration ---
# Use the MARKOVBOT_HOME env var for the project root, with a fallback.
PROJECT_ROOT = Path(os.environ.get('MARKOVBOT_HOME', Path(__file__).parent.parent))
TRAINING_DATA_DIR = PROJECT_ROOT / 'training_data'
CORPUS_PATH = Path(os.environ.get('MARKOVBOT_CORPUS', TRAINING_DATA_DIR / 'corpus.txt'))

# --- Generation Configuration ---
DEFAULT_PREFIX_LEN = 2   # Words of context per prefix
DEFAULT_NUM_WORDS = 30   # Upper bound on words per generated post
DEFAULT_MAX_TRIES = 100  # Attempts at producing a complete sentence

# --- Schedule Configuration (seconds) ---
MIN_POST_DELAY = 3600
MAX_POST_DELAY = 10800

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
