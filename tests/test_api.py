from fastapi.testclient import TestClient
from recipe_safety.main import app


client = TestClient(app)


def test_validate_recipe_blocks_medical_restriction():
    response = client.post(
        "/api/validate-recipe",
        json={
            "recipe": {
                "id": "1",
                "title": "Test Recipe",
                "ingredients": ["1 cup flour", "1/2 cup sugar", "1 tbsp peanut butter"]
            },
            "preferences": {
                "severityLevels": {"peanut butter": "medical"},
                "medicalConditions": [{"id": "1", "name": "Custom", "severity": "severe", "customName": "Peanut Allergy"}]
            }
        }
    )
    assert response.status_code == 200
    assert "X-Request-ID" in response.headers
    data = response.json()

    assert data["isSafe"] is False
    assert data["blockers"][0]["ingredient"] == "1 tbsp peanut butter"
    assert data["blockers"][0]["medicalCondition"] == "Peanut Allergy"
    assert data["warnings"] == []


def test_validate_recipe_without_preferences_is_safe():
    response = client.post(
        "/api/validate-recipe",
        json={"recipe": {"id": "2", "ingredients": ["1 cup milk"]}}
    )
    assert response.status_code == 200
    assert response.json()["isSafe"] is True


def test_validate_recipe_rejects_missing_ingredients():
    response = client.post("/api/validate-recipe", json={"recipe": {"id": "3"}})
    assert response.status_code == 422


def test_validate_search_reports_conflicts():
    response = client.post(
        "/api/validate-search",
        json={"preferences": {"embraceFoods": ["dairy"], "avoidFoods": ["cheese"]}}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["isValid"] is False
    assert data["conflicts"] == ["dairy"]


def test_alternatives_endpoint():
    response = client.get("/api/alternatives", params={"ingredient": "dairy"})
    assert response.status_code == 200
    assert response.json() == {
        "ingredient": "dairy",
        "alternatives": ["plant-based milk", "coconut milk", "almond milk"]
    }


def test_openapi_docs_list_endpoints():
    paths = client.get("/openapi.json").json().get("paths", {})
    assert "post" in paths["/api/validate-recipe"]
    assert "post" in paths["/api/validate-search"]
    assert "get" in paths["/api/alternatives"]
