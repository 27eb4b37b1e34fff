"""Dashboard API tests."""

from src.api.dashboard import MAX_PAGE
from src.config import get_settings


def add_project(client, headers, site_id, title, description="A project", order_index=None):
    body = {"title": title, "description": description, "date": "2024-02-02"}
    if order_index is not None:
        body["order_index"] = order_index
    response = client.post(f"/api/sites/{site_id}/projects", headers=headers, json=body)
    assert response.status_code == 201
    return response.json()["data"]


def test_dashboard_projects_search(client, auth_headers, site):
    """Search matches title or description, case-insensitively."""
    add_project(client, auth_headers, site["site_id"], "Alpha Rocket")
    add_project(client, auth_headers, site["site_id"], "Garden", description="An ALPHA build")
    add_project(client, auth_headers, site["site_id"], "Beta")

    response = client.get(
        "/api/dashboard/projects",
        headers=auth_headers,
        params={"site_id": site["site_id"], "search_query": "alpha"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert sorted(p["title"] for p in body["data"]) == ["Alpha Rocket", "Garden"]


def test_dashboard_projects_pagination(client, auth_headers, site):
    """total counts all matches, not just the page."""
    for i in range(3):
        add_project(client, auth_headers, site["site_id"], f"Project {i}", order_index=i)

    response = client.get(
        "/api/dashboard/projects",
        headers=auth_headers,
        params={"site_id": site["site_id"], "page": 2, "page_size": 2},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [p["title"] for p in body["data"]] == ["Project 2"]


def test_dashboard_projects_page_out_of_range(client, auth_headers, site):
    """A page past the upper bound is a validation error, not a server error."""
    for page in (MAX_PAGE + 1, 10**30):
        response = client.get(
            "/api/dashboard/projects",
            headers=auth_headers,
            params={"site_id": site["site_id"], "page": page, "page_size": 100},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    last_page = client.get(
        "/api/dashboard/projects",
        headers=auth_headers,
        params={"site_id": site["site_id"], "page": MAX_PAGE, "page_size": 100},
    )
    assert last_page.status_code == 200
    assert last_page.json()["data"] == []


def test_dashboard_projects_requires_site_id(client, auth_headers):
    """site_id is required."""
    response = client.get("/api/dashboard/projects", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error_code"] == "MISSING_SITE_ID"


def test_dashboard_projects_other_users_site(client, other_auth_headers, site):
    """Searching another user's site is denied."""
    response = client.get(
        "/api/dashboard/projects",
        headers=other_auth_headers,
        params={"site_id": site["site_id"]},
    )
    assert response.status_code == 403


def test_dashboard_submissions(client, auth_headers, other_auth_headers, site):
    """Only submissions to the user's own sites are listed."""
    other_site = client.post(
        "/api/sites", headers=other_auth_headers, json={"site_title": "Mallory's"}
    ).json()["data"]

    client.post(
        "/api/contact/submit",
        json={"site_id": site["site_id"], "email": "fan@example.com", "message": "Hi Alice"},
    )
    client.post(
        "/api/contact/submit",
        json={"site_id": other_site["site_id"], "email": "fan@example.com", "message": "Hi M"},
    )
    client.post("/api/contact/submit", json={"email": "fan@example.com", "message": "Orphan"})

    response = client.get("/api/dashboard/submissions", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["data"][0]["message"] == "Hi Alice"


def test_dashboard_submissions_requires_auth(client):
    """Submissions are private."""
    response = client.get("/api/dashboard/submissions")
    assert response.status_code == 401


def test_dashboard_preview_placeholder(client, auth_headers):
    """Without a site the preview is the placeholder image."""
    response = client.get("/api/dashboard/preview", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {
        "status": "ready",
        "url": get_settings().preview_placeholder_url,
    }


def test_dashboard_preview_for_site(client, auth_headers, site):
    """With a site the preview is its public address."""
    response = client.get(
        "/api/dashboard/preview", headers=auth_headers, params={"site_id": site["site_id"]}
    )
    assert response.status_code == 200
    assert response.json()["data"]["url"] == f"https://alice.{get_settings().site_domain}"


def test_dashboard_export_none_yet(client, auth_headers, site):
    """Before any export both fields are null."""
    response = client.get("/api/dashboard/export", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"export_zip_url": None, "export_path": None}


def test_dashboard_export_after_export(client, auth_headers, site):
    """The most recent export is reported, with or without site_id."""
    exported = client.post(f"/api/sites/{site['site_id']}/export", headers=auth_headers)
    url = exported.json()["data"]["export_zip_url"]

    latest = client.get("/api/dashboard/export", headers=auth_headers)
    assert latest.json()["data"]["export_zip_url"] == url

    for_site = client.get(
        "/api/dashboard/export", headers=auth_headers, params={"site_id": site["site_id"]}
    )
    assert for_site.json()["data"] == {"export_zip_url": url, "export_path": url}


def test_dashboard_export_other_users_site(client, other_auth_headers, site):
    """Export status of another user's site is denied."""
    response = client.get(
        "/api/dashboard/export", headers=other_auth_headers, params={"site_id": site["site_id"]}
    )
    assert response.status_code == 403
