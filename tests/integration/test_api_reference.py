from pathlib import Path

from tests.support.api import client_for


def test_sop_pages(tmp_path: Path) -> None:
    client, _ = client_for(tmp_path)
    sections = client.get("/api/v1/sop").json()["items"]
    assert sections[0]["id"] == "overview"

    checkin = client.get("/api/v1/sop/checkin")
    assert checkin.status_code == 200
    assert checkin.json()["section"]["steps"]
    assert client.get("/api/v1/sop/unknown").status_code == 404


def test_vendor_pages(tmp_path: Path) -> None:
    client, context = client_for(tmp_path)
    assert len(client.get("/api/v1/resources").json()["items"]) == 4

    page = client.get("/api/v1/resources/Pearson VUE")
    assert page.status_code == 200
    assert page.json()["resource"]["id"] == "pearson"
    assert page.json()["updates"] is None
    assert context.session.selected_resource == "Pearson VUE"

    without_key = client.get("/api/v1/resources/PSI", params={"updates": "true"})
    assert without_key.json()["updates"] is None
    assert client.get("/api/v1/resources/Nobody").status_code == 404
