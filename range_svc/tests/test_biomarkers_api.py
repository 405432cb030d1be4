"""
Tests for the reference band catalog endpoints.
"""


def test_list_biomarkers(client):
    response = client.get("/api/v1/biomarkers")
    assert response.status_code == 200
    data = response.json()
    names = [b["canonical_name"] for b in data["biomarkers"]]
    assert "vitamin d" in names
    assert data["count"] == len(names)


def test_get_bands_by_alias(client):
    response = client.get("/api/v1/biomarkers/ldl/bands")
    assert response.status_code == 200
    data = response.json()
    assert data["biomarker"]["canonical_name"] == "ldl cholesterol"
    assert data["biomarker"]["unit"] == "mg/dL"
    assert [b["range_text"] for b in data["bands"]] == [
        "< 100", "100 - 130", "130 - 160", "160 - 190", "> 190",
    ]
    assert data["bands"][0]["display_color"] == "#37B45E"


def test_bands_are_ascending(client):
    response = client.get("/api/v1/biomarkers/Vitamin D/bands")
    labels = [b["label"] for b in response.json()["bands"]]
    assert labels == ["Deficient", "Insufficient", "Optimal", "High", "Toxic"]


def test_unknown_biomarker_returns_404(client):
    response = client.get("/api/v1/biomarkers/unobtainium/bands")
    assert response.status_code == 404
    data = response.json()
    assert data["detail"] == "Biomarker 'unobtainium' not found"
    assert data["context"]["biomarker"] == "unobtainium"
