"""
Unit tests for relevance scoring
"""
import pytest

from activity_search.config import CATEGORY_WEIGHT, NAME_WEIGHT, COMMENTS_WEIGHT
from activity_search.models.activity import Activity
from activity_search.search.scoring import score_activity, score_activities


@pytest.mark.unit
class TestScoreActivity:
    """Test field-weighted scores."""

    def test_all_fields_match(self, registry):
        activity = Activity(id="1", name="Rando du matin", category="RANDO", comments="Superbe rando")
        assert score_activity(activity, "rando", registry) == 700

    def test_wildcard_scores_zero(self, registry):
        activity = Activity(id="1", name="Rando du matin", category="RANDO", comments="Superbe rando")
        assert score_activity(activity, "", registry) == 0
        assert score_activity(activity, "*", registry) == 0

    def test_category_only(self, registry):
        activity = Activity(id="1", name="Sortie", category="RUN", comments=None)
        assert score_activity(activity, "course", registry) == CATEGORY_WEIGHT

    def test_name_only(self, registry):
        activity = Activity(id="1", name="Morning Run", category="WALK", comments=None)
        assert score_activity(activity, "morning", registry) == NAME_WEIGHT

    def test_comments_only(self, registry):
        activity = Activity(id="1", name="Sunday", category="PHOTOS", comments="With grandma")
        assert score_activity(activity, "grandma", registry) == COMMENTS_WEIGHT

    def test_name_and_comments(self, registry):
        activity = Activity(id="1", name="Lac Léman", category="PHOTOS", comments="Tour du lac")
        assert score_activity(activity, "lac", registry) == NAME_WEIGHT + COMMENTS_WEIGHT

    def test_no_match(self, registry, morning_run):
        assert score_activity(morning_run, "photos", registry) == 0


@pytest.mark.unit
class TestScoreActivities:

    def test_pairs_keep_input_order(self, registry, collection):
        scored = score_activities(collection, "run", registry)

        assert [item.activity.id for item in scored] == ["a1", "a2"]
        assert [item.score for item in scored] == [CATEGORY_WEIGHT + NAME_WEIGHT, 0]

    def test_empty_input(self, registry):
        assert score_activities([], "run", registry) == []
