import pytest

from portfolio_api.config import FEATURED_PROJECTS_LIMIT
from portfolio_api.models.project import Project


def project_payload(**overrides):
    payload = {
        "title": "Cloud File Manager",
        "description": "Secure file storage with sharing.",
        "imageUrl": "https://picsum.photos/seed/project3/600/400",
        "liveUrl": "https://demo.com",
        "githubUrl": "https://github.com/example/cloud",
        "technologies": ["Vue.js", "Firebase"],
        "featured": False,
    }
    payload.update(overrides)
    return payload


def test_create_project(client, auth_headers):
    response = client.post("/api/projects", json=project_payload(), headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["title"] == "Cloud File Manager"
    assert data["imageUrl"] == "https://picsum.photos/seed/project3/600/400"
    assert data["technologies"] == ["Vue.js", "Firebase"]
    assert data["featured"] is False
    assert "createdAt" in data and "updatedAt" in data


def test_create_project_requires_title(client, auth_headers):
    payload = project_payload()
    del payload["title"]

    response = client.post("/api/projects", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"].startswith("title")


def test_list_projects_newest_first(client, auth_headers):
    ids = [
        client.post("/api/projects", json=project_payload(title=f"P{i}"), headers=auth_headers).json()["id"]
        for i in range(3)
    ]

    response = client.get("/api/projects")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == list(reversed(ids))


def test_featured_listing_is_exactly_the_featured_subset(client, auth_headers):
    flags = [True, False, True, False, False, True]
    created = [
        client.post(
            "/api/projects",
            json=project_payload(title=f"P{i}", featured=flag),
            headers=auth_headers,
        ).json()
        for i, flag in enumerate(flags)
    ]

    response = client.get("/api/projects/featured")

    assert response.status_code == 200
    featured_ids = {p["id"] for p in created if p["featured"]}
    assert {p["id"] for p in response.json()} == featured_ids
    assert all(p["featured"] for p in response.json())
    assert len(client.get("/api/projects").json()) == len(flags)


def test_get_project(client, auth_headers):
    project_id = client.post("/api/projects", json=project_payload(), headers=auth_headers).json()["id"]

    response = client.get(f"/api/projects/{project_id}")

    assert response.status_code == 200
    assert response.json()["id"] == project_id


def test_get_missing_project_is_404(client):
    response = client.get("/api/projects/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_update_replaces_the_whole_project(client, auth_headers):
    project_id = client.post(
        "/api/projects", json=project_payload(featured=True), headers=auth_headers
    ).json()["id"]

    response = client.put(
        f"/api/projects/{project_id}",
        json={
            "title": "Renamed",
            "description": "New description",
            "imageUrl": "new.png",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["liveUrl"] is None
    assert data["githubUrl"] is None
    assert data["technologies"] == []
    assert data["featured"] is False


def test_update_missing_project_is_404(client, auth_headers):
    response = client.put("/api/projects/999", json=project_payload(), headers=auth_headers)

    assert response.status_code == 404


def test_delete_project(client, session, auth_headers):
    project_id = client.post("/api/projects", json=project_payload(), headers=auth_headers).json()["id"]

    response = client.delete(f"/api/projects/{project_id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Project deleted successfully"}
    assert session.get(Project, project_id) is None
    assert client.delete(f"/api/projects/{project_id}", headers=auth_headers).status_code == 404


def test_featured_limit_is_enforced_on_create(client, auth_headers):
    for i in range(FEATURED_PROJECTS_LIMIT):
        response = client.post(
            "/api/projects", json=project_payload(title=f"P{i}", featured=True), headers=auth_headers
        )
        assert response.status_code == 201

    response = client.post(
        "/api/projects", json=project_payload(title="One too many", featured=True), headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {"message": f"Maximum {FEATURED_PROJECTS_LIMIT} projects can be featured"}
    assert len(client.get("/api/projects/featured").json()) == FEATURED_PROJECTS_LIMIT


def test_featured_limit_is_enforced_on_update(client, auth_headers):
    for i in range(FEATURED_PROJECTS_LIMIT):
        client.post("/api/projects", json=project_payload(title=f"P{i}", featured=True), headers=auth_headers)
    plain_id = client.post("/api/projects", json=project_payload(title="Plain"), headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/projects/{plain_id}", json=project_payload(title="Plain", featured=True), headers=auth_headers
    )

    assert response.status_code == 400
    assert client.get(f"/api/projects/{plain_id}").json()["featured"] is False


def test_resaving_a_featured_project_at_the_limit_is_allowed(client, auth_headers):
    ids = [
        client.post("/api/projects", json=project_payload(title=f"P{i}", featured=True), headers=auth_headers).json()["id"]
        for i in range(FEATURED_PROJECTS_LIMIT)
    ]

    response = client.put(
        f"/api/projects/{ids[0]}", json=project_payload(title="Edited", featured=True), headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Edited"


@pytest.mark.parametrize("key", ["image_url", "imageUrl"])
def test_snake_and_camel_case_are_both_accepted(client, auth_headers, key):
    payload = project_payload()
    del payload["imageUrl"]
    payload[key] = "cover.png"

    response = client.post("/api/projects", json=payload, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["imageUrl"] == "cover.png"
