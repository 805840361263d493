"""Unit tests for PromptService."""

import pytest

from promptgallery.core.errors import NotFound, ValidationError
from promptgallery.services.prompts import ALL_CATEGORY, SAMPLE_PROMPTS


class TestList:
    """Tests for list and count."""

    def test_empty_gallery(self, prompt_service):
        assert prompt_service.list() == []
        assert prompt_service.count() == 0

    def test_unknown_category_is_empty_not_error(self, prompt_service):
        prompt_service.create("Men", "https://x/y.jpg", "a valid prompt text")
        assert prompt_service.list("NonexistentCategory") == []

    def test_filter_by_category(self, prompt_service):
        prompt_service.create("Men", "https://x/1.jpg", "a valid prompt text")
        kids = prompt_service.create("Kids", "https://x/2.jpg", "another prompt text")
        assert [p.id for p in prompt_service.list("Kids")] == [kids.id]

    def test_newest_first(self, prompt_service):
        older = prompt_service.create("Men", "https://x/1.jpg", "a valid prompt text")
        newer = prompt_service.create("Men", "https://x/2.jpg", "another prompt text")
        assert [p.id for p in prompt_service.list()] == [newer.id, older.id]


class TestDistinctCategories:
    """Tests for distinct_categories."""

    def test_all_present_when_empty(self, prompt_service):
        assert prompt_service.distinct_categories() == [ALL_CATEGORY]

    def test_no_duplicates_and_sorted(self, prompt_service):
        for category in ["Women", "Men", "Women", "Couple"]:
            prompt_service.create(category, "https://x/y.jpg", "a valid prompt text")
        assert prompt_service.distinct_categories() == ["All", "Couple", "Men", "Women"]


class TestCreate:
    """Tests for create."""

    def test_create_increments_count(self, prompt_service):
        before = prompt_service.count()
        prompt = prompt_service.create("Men", "https://x/y.jpg", "a valid prompt text")
        assert prompt.id is not None
        assert prompt.created_at
        assert prompt_service.count() == before + 1

    def test_short_text_persists_nothing(self, prompt_service):
        with pytest.raises(ValidationError) as exc_info:
            prompt_service.create("Men", "https://x/y.jpg", "too short")
        assert [e.field for e in exc_info.value.errors] == ["prompt_text"]
        assert prompt_service.count() == 0

    def test_invalid_url(self, prompt_service):
        with pytest.raises(ValidationError):
            prompt_service.create("Men", "not-a-url", "a valid prompt text")

    def test_empty_category(self, prompt_service):
        with pytest.raises(ValidationError):
            prompt_service.create("", "https://x/y.jpg", "a valid prompt text")


class TestUpdate:
    """Tests for update."""

    def test_update_reflected_in_list(self, prompt_service):
        prompt = prompt_service.create("Men", "https://x/y.jpg", "a valid prompt text")
        prompt_service.update(prompt.id, "Kids", "https://x/z.png", "an updated prompt text")
        [listed] = prompt_service.list()
        assert (listed.category, listed.image_url, listed.prompt_text) == (
            "Kids",
            "https://x/z.png",
            "an updated prompt text",
        )
        assert listed.created_at == prompt.created_at

    def test_update_missing(self, prompt_service):
        with pytest.raises(NotFound):
            prompt_service.update(999, "Kids", "https://x/z.png", "an updated prompt text")

    def test_invalid_update_leaves_row(self, prompt_service):
        prompt = prompt_service.create("Men", "https://x/y.jpg", "a valid prompt text")
        with pytest.raises(ValidationError):
            prompt_service.update(prompt.id, "Kids", "https://x/z.png", "short")
        assert prompt_service.list()[0].category == "Men"


class TestDelete:
    """Tests for delete."""

    def test_delete_then_update_or_delete_fails(self, prompt_service):
        prompt = prompt_service.create("Men", "https://x/y.jpg", "a valid prompt text")
        prompt_service.delete(prompt.id)

        with pytest.raises(NotFound):
            prompt_service.update(prompt.id, "Men", "https://x/y.jpg", "a valid prompt text")
        with pytest.raises(NotFound):
            prompt_service.delete(prompt.id)
        assert prompt_service.count() == 0


class TestSeedSamples:
    """Tests for seed_samples."""

    def test_seeds_once(self, prompt_service):
        assert prompt_service.seed_samples() == len(SAMPLE_PROMPTS)
        assert prompt_service.seed_samples() == 0
        assert prompt_service.distinct_categories() == ["All", "Couple", "Kids", "Men", "Women"]
