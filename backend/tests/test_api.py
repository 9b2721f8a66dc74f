"""
API and page route tests.
"""

import pytest


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestCalculateEndpoint:
    def test_calculate(self, client):
        response = client.post(
            "/api/tax/calculate",
            json={"gross_income": 75000, "state": "texas", "filing_status": "single"},
        )
        assert response.status_code == 200
        body = response.json()

        assert body["state_name"] == "Texas"
        assert body["filing_status"] == "single"
        assert body["federal"] == pytest.approx(7670)
        assert body["fica"] == pytest.approx(5737.5)
        assert body["total_tax"] == pytest.approx(13407.5)
        assert body["net"] == pytest.approx(61592.5)
        assert body["effective_rate"] == pytest.approx(17.88)
        assert body["disclaimer"]

    def test_unknown_state_and_status_fall_back(self, client):
        response = client.post(
            "/api/tax/calculate",
            json={"gross_income": 75000, "state": "Atlantis", "filing_status": "widowed"},
        )
        assert response.status_code == 200
        body = response.json()

        assert body["state"] == 0
        assert body["state_name"] == "Atlantis"
        assert body["filing_status"] == "single"
        assert body["net"] == pytest.approx(61592.5)

    @pytest.mark.parametrize("gross_income", [0, -1000, "inf", "Infinity", "nan"])
    def test_invalid_income_rejected(self, client, gross_income):
        response = client.post("/api/tax/calculate", json={"gross_income": gross_income, "state": "Texas"})
        assert response.status_code == 422


class TestSalaryEndpoint:
    def test_salary_scenario(self, client):
        response = client.get("/api/tax/salary/new-york/100000")
        assert response.status_code == 200
        body = response.json()

        assert body["state_name"] == "New York"
        assert body["state"] == pytest.approx(6500)

    def test_bad_amount(self, client):
        response = client.get("/api/tax/salary/new-york/lots")
        assert response.status_code == 400


class TestStateRates:
    def test_lists_all_states_sorted(self, client):
        response = client.get("/api/tax/state-rates")
        assert response.status_code == 200
        states = response.json()["states"]

        assert len(states) == 51
        assert [state["name"] for state in states] == sorted(state["name"] for state in states)
        assert states[0] == {"code": "AL", "name": "Alabama", "slug": "alabama", "rate": 0.04}


class TestPages:
    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        html = response.text

        assert "US Smart Tax 2026" in html
        assert "Estimated Paycheck Breakdown" not in html
        assert 'href="/salary/texas/30000"' in html
        assert "Popular Calculations for Texas" in html

    def test_calculate_page(self, client):
        response = client.get(
            "/calculate",
            params={"income": "75000", "state": "texas", "filing_status": "single"},
        )
        assert response.status_code == 200
        html = response.text

        assert "Estimated Paycheck Breakdown" in html
        assert "$61,592.50" in html
        assert "-$7,670.00" in html
        assert "17.9%" in html
        assert "$5,132.71" in html
        assert "$2,368.94" in html

    def test_calculate_page_invalid_income(self, client):
        response = client.get("/calculate", params={"income": "abc", "state": "Texas"})
        assert response.status_code == 200
        assert "Estimated Paycheck Breakdown" not in response.text

    def test_salary_page(self, client):
        response = client.get("/salary/new-york/75000")
        assert response.status_code == 200
        html = response.text

        assert "Salary after Tax in New York" in html
        assert "<title>$75,000 After Tax in New York | 2026 Calculator</title>" in html
        assert "$56,717.50" in html
        assert 'href="/salary/new-york/150000"' in html

    def test_salary_page_additional_medicare(self, client):
        html = client.get("/salary/texas/250000").text
        assert "Includes Additional Medicare Tax" in html
        assert "-$450.00" in html

    def test_salary_page_unknown_state(self, client):
        html = client.get("/salary/atlantis/75000").text
        assert "Salary after Tax in Texas" in html
        assert "$61,592.50" in html

    def test_calculate_page_unknown_status_shows_single(self, client):
        response = client.get(
            "/calculate",
            params={"income": "75000", "state": "Texas", "filing_status": "widowed"},
        )
        html = response.text

        assert 'value="single" checked' in html
        assert "$61,592.50" in html

    def test_salary_page_path_decoded_once(self, client):
        html = client.get("/salary/new%2520york/75000").text
        assert "Salary after Tax in Texas" in html
        assert "Salary after Tax in New York" not in html
