from sqlmodel import func, select

from portfolio_api.models.content import AboutSection, HeroSection, SiteSettings


def count_rows(session, model):
    return session.exec(select(func.count()).select_from(model)).one()


def test_hero_is_empty_until_saved(client):
    response = client.get("/api/cms/hero")

    assert response.status_code == 200
    assert response.json() == {}


def test_hero_upsert_twice_leaves_one_row_with_latest_payload(client, session, auth_headers):
    first = client.put(
        "/api/cms/hero", json={"name": "Akash", "roles": ["Developer"]}, headers=auth_headers
    )
    second = client.put(
        "/api/cms/hero",
        json={"name": "Akash S.", "roles": ["Full Stack Developer", "ML Enthusiast"]},
        headers=auth_headers,
    )

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert count_rows(session, HeroSection) == 1

    hero = client.get("/api/cms/hero").json()
    assert hero["name"] == "Akash S."
    assert hero["roles"] == ["Full Stack Developer", "ML Enthusiast"]


def test_about_upsert_twice_leaves_one_row_with_latest_payload(client, session, auth_headers):
    client.put("/api/cms/about", json={"content": "First draft"}, headers=auth_headers)
    client.put("/api/cms/about", json={"content": "Final words"}, headers=auth_headers)

    assert count_rows(session, AboutSection) == 1
    assert client.get("/api/cms/about").json()["content"] == "Final words"


def test_settings_upsert_twice_leaves_one_row_with_latest_payload(client, session, auth_headers):
    client.put(
        "/api/settings",
        json={"aboutText": "Hi", "githubUrl": "https://github.com/a", "twitterUrl": "https://x.com/a"},
        headers=auth_headers,
    )
    response = client.put(
        "/api/settings",
        json={"aboutText": "Hello", "linkedinUrl": "https://linkedin.com/in/a"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert count_rows(session, SiteSettings) == 1

    settings = client.get("/api/settings").json()
    assert settings["aboutText"] == "Hello"
    assert settings["linkedinUrl"] == "https://linkedin.com/in/a"
    # full replace: values from the first payload are gone
    assert settings["githubUrl"] is None
    assert settings["twitterUrl"] is None


def test_settings_empty_until_saved(client):
    assert client.get("/api/settings").json() == {}


def test_upsert_recovers_from_concurrent_create(session):
    from portfolio_api.crud.content import upsert_singleton
    from portfolio_api.models.content import SINGLETON_ID

    # A row written by another request after this one looked and found nothing
    session.add(AboutSection(id=SINGLETON_ID, content="theirs"))
    session.commit()
    session.expunge_all()

    original_get = session.get
    calls = []

    def get_missing_once(model, pk):
        calls.append(pk)
        if len(calls) == 1:
            return None
        return original_get(model, pk)

    session.get = get_missing_once
    about = upsert_singleton(session, AboutSection, {"content": "ours"})
    session.get = original_get

    assert about.content == "ours"
    assert count_rows(session, AboutSection) == 1


def education_payload(**overrides):
    payload = {
        "institution": "IIT Delhi",
        "degree": "B.Tech",
        "field": "Computer Science",
        "startDate": "2019-07-01",
        "endDate": "2023-05-31",
        "grade": "8.9 CGPA",
        "achievements": ["Dean's list"],
    }
    payload.update(overrides)
    return payload


def test_education_listed_by_start_date_descending(client, auth_headers):
    for start in ["2015-06-01", "2019-07-01", "2017-04-01"]:
        response = client.post(
            "/api/cms/education", json=education_payload(startDate=start, endDate=None), headers=auth_headers
        )
        assert response.status_code == 201

    response = client.get("/api/cms/education")

    assert [e["startDate"] for e in response.json()] == ["2019-07-01", "2017-04-01", "2015-06-01"]


def test_education_update_clears_omitted_optional_fields(client, auth_headers):
    entry_id = client.post("/api/cms/education", json=education_payload(), headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/cms/education/{entry_id}",
        json={"institution": "IIT Delhi", "degree": "M.Tech", "field": "AI", "startDate": "2023-07-01"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["degree"] == "M.Tech"
    assert data["endDate"] is None
    assert data["grade"] is None
    assert data["achievements"] == []
    assert client.get(f"/api/cms/education/{entry_id}").json()["degree"] == "M.Tech"


def test_education_end_before_start_is_rejected(client, auth_headers):
    response = client.post(
        "/api/cms/education",
        json=education_payload(startDate="2020-01-01", endDate="2019-01-01"),
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_education_delete_and_missing(client, auth_headers):
    entry_id = client.post("/api/cms/education", json=education_payload(), headers=auth_headers).json()["id"]

    assert client.delete(f"/api/cms/education/{entry_id}", headers=auth_headers).json() == {
        "message": "Education entry deleted successfully"
    }
    missing = client.get(f"/api/cms/education/{entry_id}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Education entry not found"}
