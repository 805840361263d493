"""CRUD over gallery prompts plus category enumeration."""

from __future__ import annotations

import logging

from ..core.errors import NotFound
from ..core.models import Prompt
from ..core.prompts_db import PromptsDB
from ..core.validation import validate_prompt_fields

logger = logging.getLogger(__name__)

# Synthetic category meaning "no filter"; always first in the category list.
ALL_CATEGORY = "All"

SAMPLE_PROMPTS = [
    {
        "category": "Men",
        "image_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400&h=400&fit=crop&crop=face",
        "prompt_text": (
            "Professional portrait of a confident business person in modern office "
            "setting, wearing a tailored navy suit, crisp lighting, contemporary "
            "style, photorealistic"
        ),
    },
    {
        "category": "Women",
        "image_url": "https://images.unsplash.com/photo-1494790108755-2616b612b1dd?w=400&h=400&fit=crop&crop=face",
        "prompt_text": (
            "Elegant professional woman in modern urban setting, sophisticated casual "
            "attire, warm natural lighting, confident expression, lifestyle portrait"
        ),
    },
    {
        "category": "Couple",
        "image_url": "https://images.unsplash.com/photo-1516589178581-6cd7833ae3b2?w=400&h=400&fit=crop",
        "prompt_text": (
            "Happy couple walking together in modern urban setting, stylish casual "
            "attire, warm natural lighting, candid lifestyle moment, photorealistic"
        ),
    },
    {
        "category": "Kids",
        "image_url": "https://images.unsplash.com/photo-1503454537195-1dcabb73ffb9?w=400&h=400&fit=crop&crop=face",
        "prompt_text": (
            "Cheerful children playing in modern playground, bright colorful clothing, "
            "soft natural lighting, joyful expressions, outdoor lifestyle photography"
        ),
    },
]


class PromptService:
    """Operations on the prompts table.

    Validation happens here rather than in the data store, so a failed
    ``create`` never touches the database.
    """

    def __init__(self, db: PromptsDB):
        self.db = db

    def list(self, category: str | None = None) -> list[Prompt]:
        """All prompts, or only those in ``category``, newest first."""
        return self.db.list_prompts(category)

    def count(self) -> int:
        return self.db.count_prompts()

    def distinct_categories(self) -> list[str]:
        """Categories currently in use, ascending, with "All" prepended."""
        return [ALL_CATEGORY, *self.db.distinct_categories()]

    def create(self, category: str, image_url: str, prompt_text: str) -> Prompt:
        """Validate and persist a new prompt.

        Raises:
            ValidationError: If any field is invalid (nothing is persisted)
        """
        fields = validate_prompt_fields(category, image_url, prompt_text)
        prompt = self.db.insert_prompt(*fields)
        logger.info(f"Created prompt {prompt.id} in category '{prompt.category}'")
        return prompt

    def update(self, prompt_id: int, category: str, image_url: str, prompt_text: str) -> Prompt:
        """Overwrite every mutable field of an existing prompt.

        Raises:
            ValidationError: If any field is invalid
            NotFound: If no prompt has ``prompt_id``
        """
        fields = validate_prompt_fields(category, image_url, prompt_text)
        prompt = self.db.update_prompt(prompt_id, *fields)
        if prompt is None:
            raise NotFound()
        logger.info(f"Updated prompt {prompt_id}")
        return prompt

    def delete(self, prompt_id: int) -> None:
        """Permanently delete a prompt.

        Raises:
            NotFound: If no prompt has ``prompt_id``
        """
        if not self.db.delete_prompt(prompt_id):
            raise NotFound()
        logger.info(f"Deleted prompt {prompt_id}")

    def seed_samples(self) -> int:
        """Populate an empty gallery with the sample prompts."""
        inserted = self.db.seed_sample_prompts(SAMPLE_PROMPTS)
        if inserted:
            logger.info(f"Added {inserted} sample prompts to empty database")
        return inserted
