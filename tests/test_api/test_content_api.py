"""HTTP tests for country, university and major routes."""

import pytest

from conftest import names
from studyhub.repositories import countries


def country_payload(slug: str, **extra) -> dict:
    return {**names("name", slug.title()), "slug": slug, **extra}


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestCountryRoutes:
    @pytest.mark.asyncio
    async def test_create_list_and_get(self, client):
        created = await client.post("/api/countries/", json=country_payload("turkey"))
        assert created.status_code == 201
        country_id = created.json()["id"]

        await client.post(
            "/api/countries/", json=country_payload("malaysia", status="INACTIVE")
        )
        listed = await client.get("/api/countries/", params={"status": "ACTIVE"})
        body = listed.json()
        assert body["total"] == 1
        assert body["data"][0]["slug"] == "turkey"
        assert body["page"] == 1
        assert body["limit"] == 20

        fetched = await client.get(f"/api/countries/{country_id}")
        assert fetched.json()["name_en"] == "Turkey (en)"
        by_slug = await client.get("/api/countries/slug/turkey")
        assert by_slug.json()["id"] == country_id

    @pytest.mark.asyncio
    async def test_missing_country_is_404(self, client):
        assert (await client.get("/api/countries/999")).status_code == 404
        assert (await client.delete("/api/countries/999")).status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_409(self, client):
        await client.post("/api/countries/", json=country_payload("turkey"))
        response = await client.post("/api/countries/", json=country_payload("turkey"))
        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_limit_over_maximum_is_422(self, client):
        response = await client.get("/api/countries/", params={"limit": 500})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_patch_sends_only_present_fields(self, client):
        created = await client.post(
            "/api/countries/", json=country_payload("turkey", description_en="Bridge of continents")
        )
        country_id = created.json()["id"]

        patched = await client.patch(f"/api/countries/{country_id}", json={"status": "INACTIVE"})
        assert patched.status_code == 200
        assert patched.json()["status"] == "INACTIVE"
        assert patched.json()["description_en"] == "Bridge of continents"

        rejected = await client.patch(f"/api/countries/{country_id}", json={"slug": None})
        assert rejected.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_guarded_by_university(self, client):
        country_id = (await client.post("/api/countries/", json=country_payload("turkey"))).json()["id"]
        await client.post(
            "/api/universities/",
            json={**names("name", "METU"), "slug": "metu", "country_id": country_id},
        )

        response = await client.delete(f"/api/countries/{country_id}")
        assert response.status_code == 409
        assert (await client.get(f"/api/countries/{country_id}")).status_code == 200


class TestUniversityRoutes:
    @pytest.mark.asyncio
    async def test_unknown_country_is_400(self, client):
        response = await client.post(
            "/api/universities/",
            json={**names("name", "Ghost"), "slug": "ghost", "country_id": 404},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Country with id 404 not found"

    @pytest.mark.asyncio
    async def test_offered_major_with_tuition(self, client):
        country_id = (await client.post("/api/countries/", json=country_payload("malaysia"))).json()["id"]
        university = await client.post(
            "/api/universities/",
            json={
                **names("name", "UM"),
                "slug": "um",
                "country_id": country_id,
                "gallery_images": ["front.jpg", "library.jpg"],
            },
        )
        major = await client.post("/api/majors/", json={**names("name", "Law"), "slug": "law"})
        university_id = university.json()["id"]
        major_id = major.json()["id"]

        link = await client.post(
            "/api/university-majors/",
            json={
                "university_id": university_id,
                "major_id": major_id,
                "study_levels": ["BACHELOR", "MASTER"],
                "tuition_fee_min": "5000.50",
            },
        )
        assert link.status_code == 201

        details = await client.get(f"/api/university-majors/{university_id}/{major_id}")
        assert details.json()["study_levels"] == ["BACHELOR", "MASTER"]
        assert details.json()["tuition_fee_min"] == "5000.50"

        offered = await client.get(f"/api/majors/by-university/{university_id}")
        assert [m["slug"] for m in offered.json()] == ["law"]

        fetched = await client.get(f"/api/universities/{university_id}")
        assert fetched.json()["gallery_images"] == ["front.jpg", "library.jpg"]


class TestConcurrentWrites:
    @pytest.mark.asyncio
    async def test_slug_race_is_409(self, client, monkeypatch):
        async def already_checked(*args, **kwargs):
            return None

        await client.post("/api/countries/", json=country_payload("turkey"))
        monkeypatch.setattr(countries, "ensure_unique", already_checked)

        response = await client.post("/api/countries/", json=country_payload("turkey"))
        assert response.status_code == 409
        assert response.json()["detail"] == "Country with slug 'turkey' already exists"
