import pytest

from app.core.salary_pages import (
    find_state,
    format_state_slug,
    page_metadata,
    popular_links,
    resolve_state,
    salary_path,
    state_slug,
)
from app.utils.constants import STATE_TAX_RATES


class TestStateSlugs:
    def test_state_slug(self):
        assert state_slug("New York") == "new-york"
        assert state_slug("District of Columbia") == "district-of-columbia"

    @pytest.mark.parametrize("state", sorted(STATE_TAX_RATES))
    def test_slug_round_trip(self, state):
        assert resolve_state(state_slug(state)) == state

    @pytest.mark.parametrize(
        "text",
        ["new york", "NEW-YORK", "  New   York ", "New-York", "ny"],
    )
    def test_resolve_normalizes_text(self, text):
        assert resolve_state(text) == "New York"

    def test_resolve_falls_back_to_default(self):
        assert resolve_state("atlantis") == "Texas"
        assert resolve_state("", default="Ohio") == "Ohio"
        assert resolve_state(None) == "Texas"
        assert find_state("atlantis") is None

    def test_percent_escapes_are_not_decoded_again(self):
        assert find_state("new%20york") is None
        assert format_state_slug("new%20york") == "New%20york"

    def test_format_state_slug_capitalizes_words(self):
        assert format_state_slug("new-york") == "New York"
        assert format_state_slug("district-of-columbia") == "District Of Columbia"


class TestPopularLinks:
    def test_links_for_state(self):
        links = popular_links("New York")

        assert len(links) == 10
        assert links[0].href == "/salary/new-york/30000"
        assert links[0].label == "$30,000 in New York"
        assert links[-1].href == salary_path("New York", 150000)
        assert [link.amount for link in links] == sorted(link.amount for link in links)


class TestPageMetadata:
    def test_title_and_description(self):
        metadata = page_metadata("new-york", "75000")

        assert metadata.title == "$75,000 After Tax in New York | 2026 Calculator"
        assert metadata.description == (
            "Calculate your 2026 take-home pay in New York with a salary of $75,000. "
            "See Federal and State tax breakdown instantly."
        )

    def test_amount_uses_leading_integer(self):
        assert page_metadata("texas", "75000.99").title.startswith("$75,000 After Tax in Texas")

    def test_non_numeric_amount(self):
        assert page_metadata("texas", "lots").title.startswith("$NaN After Tax")
