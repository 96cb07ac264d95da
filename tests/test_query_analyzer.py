import pytest

from agent.query_analyzer import KeywordQueryAnalyzer
from src.models.intent.intent import Intent


class TestKeywordQueryAnalyzer:
    """Test cases for the KeywordQueryAnalyzer class."""

    def setup_method(self):
        self.analyzer = KeywordQueryAnalyzer()

    def test_trip_plan_query(self):
        """Test a trip planning sentence with a comma after the place."""
        intent = self.analyzer.analyze("I'm going to Bangalore, let's plan my trip")

        assert intent == Intent(place="Bangalore", wants_weather=False, wants_places=True)

    def test_temperature_question(self):
        """Test a weather-only question ending in a question mark."""
        intent = self.analyzer.analyze("What's the temperature in Paris?")

        assert intent.place == "Paris"
        assert intent.wants_weather is True
        assert intent.wants_places is False

    def test_visit_prefix_at_start(self):
        """Test that a leading capitalized Visit still works as the preposition."""
        intent = self.analyzer.analyze("Visit Atlantis")

        assert intent.place == "Atlantis"
        assert intent.wants_places is True
        assert intent.wants_weather is False

    def test_multi_word_place_after_preposition(self):
        """Test multi-word capitalized names captured up to the terminator."""
        intent = self.analyzer.analyze("Will it rain in New York City?")

        assert intent.place == "New York City"
        assert intent.wants_weather is True

    def test_place_terminated_by_period(self):
        """Test a period ends the captured place name."""
        intent = self.analyzer.analyze("I want to visit Rome. What are the best spots?")

        assert intent.place == "Rome"
        assert intent.wants_places is True

    def test_lowercase_name_after_preposition_is_not_captured(self):
        """Test the captured name has to start with an uppercase letter."""
        intent = self.analyzer.analyze("weather in paris")

        assert intent.place == "weather in paris"
        assert intent.wants_weather is True

    def test_fallback_keeps_segment_without_preposition(self):
        """Test the fallback returns the pre-comma segment when no preposition matches."""
        intent = self.analyzer.analyze("Tell me about New York attractions")

        assert intent.place == "Tell me about New York attractions"
        assert intent.wants_places is True
        assert intent.wants_weather is False

    def test_fallback_uses_text_before_first_comma(self):
        """Test the fallback cuts at the first comma."""
        intent = self.analyzer.analyze("Lisbon, Portugal, what is the climate like")

        assert intent.place == "Lisbon"
        assert intent.wants_weather is True

    def test_fallback_uses_text_before_question_mark(self):
        """Test the fallback cuts at the first question mark."""
        intent = self.analyzer.analyze("Kyoto? hot or cold")

        assert intent.place == "Kyoto"
        assert intent.wants_weather is True

    @pytest.mark.parametrize(
        "query,expected_place",
        [
            ("go to lisbon", "lisbon"),
            ("GO TO madrid, please", "madrid"),
            ("visit oslo?", "oslo"),
            ("I'M GOING TO berlin", "berlin"),
        ],
    )
    def test_fallback_strips_leading_trip_phrase(self, query, expected_place):
        """Test leading trip phrases are removed case-insensitively in the fallback."""
        assert self.analyzer.analyze(query).place == expected_place

    def test_no_keywords_leaves_both_flags_false(self):
        """Test the analyzer does not pre-resolve the fetch-everything default."""
        intent = self.analyzer.analyze("Tokyo")

        assert intent.place == "Tokyo"
        assert intent.wants_weather is False
        assert intent.wants_places is False

    def test_both_keyword_groups(self):
        """Test a query that matches both keyword groups."""
        intent = self.analyzer.analyze("Weather and tourist spots in Cairo")

        assert intent.place == "Cairo"
        assert intent.wants_weather is True
        assert intent.wants_places is True

    @pytest.mark.parametrize(
        "keyword", ["temperature", "weather", "climate", "hot", "cold", "rain"]
    )
    def test_each_weather_keyword(self, keyword):
        """Test every weather keyword sets wants_weather."""
        intent = self.analyzer.analyze(f"{keyword.upper()} in Oslo")

        assert intent.wants_weather is True
        assert intent.wants_places is False

    @pytest.mark.parametrize(
        "keyword", ["places", "attractions", "tourist", "spots", "things to do", "plan", "trip"]
    )
    def test_each_places_keyword(self, keyword):
        """Test every sightseeing keyword sets wants_places."""
        intent = self.analyzer.analyze(f"{keyword} in Oslo")

        assert intent.wants_places is True
        assert intent.wants_weather is False

    def test_keywords_match_inside_words(self):
        """Test keywords are plain substrings, not whole words."""
        intent = self.analyzer.analyze("Photography in Reykjavik")

        assert intent.wants_weather is True

    def test_analyze_is_deterministic(self):
        """Test analyzing the same query twice gives equal intents."""
        query = "What's the weather in Lima, and places to see?"

        assert self.analyzer.analyze(query) == self.analyzer.analyze(query)


class TestIntentActivation:
    """Test cases for the lookup activation rule on Intent."""

    @pytest.mark.parametrize(
        "wants_weather,wants_places,activate_weather,activate_places",
        [
            (True, False, True, False),
            (False, True, False, True),
            (True, True, True, True),
            (False, False, True, True),
        ],
    )
    def test_activation_rule(self, wants_weather, wants_places, activate_weather, activate_places):
        """Test only one lookup runs when exactly one keyword group matched."""
        intent = Intent(place="Oslo", wants_weather=wants_weather, wants_places=wants_places)

        assert intent.activate_weather is activate_weather
        assert intent.activate_places is activate_places
