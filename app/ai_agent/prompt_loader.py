"""
Prompt template loading for the Ria agents.
"""
import logging
import os
from functools import lru_cache

logger = logging.getLogger(__name__)

PROMPTS_DIR = os.path.join(os.path.dirname(__file__), "prompts")


@lru_cache()
def load_prompt_template(file_name: str) -> str:
    """
    Load a str.format template from the prompts directory.

    Raises:
        FileNotFoundError: If the template is not packaged.
    """
    prompt_path = os.path.join(PROMPTS_DIR, file_name)
    try:
        with open(prompt_path, 'r', encoding='utf-8') as f:
            template = f.read()
    except OSError as e:
        logger.error(f"Failed to load prompt template {file_name}: {str(e)}")
        raise
    logger.info(f"Loaded prompt template {file_name}")
    return template
