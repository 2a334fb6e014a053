"""
Environment loading for FairHire.

Settings come from process environment variables, optionally seeded from a
``.env`` file next to the package. Variables already set in the process
win over values in the file.

Recognized variables:
    OPENAI_API_KEY, OPENAI_MODEL, OPENAI_API_TYPE
    AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_KEY, AZURE_OPENAI_DEPLOYMENT,
    AZURE_OPENAI_API_VERSION
    FAIRHIRE_USE_LLM, CANDIDATE_NAME, OUTPUT_DIR
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


DEFAULT_ENV_PATH = Path(__file__).parent.parent / ".env"


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file into os.environ.

    Args:
        env_path: File to read. Defaults to python/.env.

    Returns:
        True if the file existed and was loaded.
    """
    path = Path(env_path) if env_path is not None else DEFAULT_ENV_PATH
    loaded = load_dotenv(path)
    if loaded:
        logger.debug("Loaded environment from %s", path)
    return loaded
