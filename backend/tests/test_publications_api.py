def create_circular(client, **payload):
    return client.post("/api/circulars/create.php", json=payload)


class TestCircularPeriods:
    def test_duplicate_month_and_year_conflicts(self, admin_client):
        first = create_circular(admin_client, title="March", month=3, year=2024)
        second = create_circular(admin_client, title="March again", month=3, year=2024)

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.get_json()["error"] == "Circular for this month and year already exists"

    def test_period_bounds(self, admin_client):
        assert create_circular(admin_client, title="Bad", month=13, year=2024).status_code == 400
        assert create_circular(admin_client, title="Bad", month=1, year=1999).status_code == 400
        assert create_circular(admin_client, title="Bad", month="x", year=2024).status_code == 400

    def test_update_into_taken_period_conflicts(self, admin_client):
        create_circular(admin_client, title="Jan", month=1, year=2024)
        feb_id = create_circular(admin_client, title="Feb", month=2, year=2024).get_json()["id"]

        response = admin_client.put(f"/api/circulars/update?id={feb_id}", json={"month": 1})

        assert response.status_code == 409

    def test_update_own_period_is_allowed(self, admin_client):
        jan_id = create_circular(admin_client, title="Jan", month=1, year=2024).get_json()["id"]

        response = admin_client.put(
            f"/api/circulars/update?id={jan_id}", json={"month": 1, "title": "January"}
        )

        assert response.status_code == 200

    def test_deleted_period_can_be_reused(self, admin_client):
        circular_id = create_circular(admin_client, title="Jan", month=1, year=2024).get_json()["id"]
        admin_client.delete(f"/api/circulars/delete?id={circular_id}")

        assert create_circular(admin_client, title="Jan", month=1, year=2024).status_code == 200

    def test_newsline_uses_its_own_message(self, admin_client):
        payload = {"title": "Issue", "month": 6, "year": 2024}
        admin_client.post("/api/newsline/create", json=payload)
        response = admin_client.post("/api/newsline/create", json=payload)

        assert response.status_code == 409
        assert response.get_json()["error"] == "NewsLine issue for this month and year already exists"


class TestArchive:
    def test_archive_groups_active_live_rows(self, admin_client, anon_client):
        create_circular(admin_client, title="A", month=1, year=2023)
        create_circular(admin_client, title="B", month=5, year=2024)
        create_circular(admin_client, title="C", month=2, year=2024)
        create_circular(admin_client, title="Hidden", month=3, year=2024, is_active=False)
        deleted_id = create_circular(admin_client, title="Gone", month=9, year=2024).get_json()["id"]
        admin_client.delete(f"/api/circulars/delete?id={deleted_id}")

        archive = anon_client.get("/api/circulars/archive.php").get_json()["archive"]

        assert list(archive) == ["2024", "2023"]
        assert archive["2024"] == [{"month": 5, "count": 1}, {"month": 2, "count": 1}]
        assert archive["2023"] == [{"month": 1, "count": 1}]

    def test_list_filters_and_archive(self, admin_client, anon_client):
        create_circular(admin_client, title="A", month=1, year=2023)
        create_circular(admin_client, title="B", month=5, year=2024)

        body = anon_client.get("/api/circulars/list?year=2024").get_json()

        assert [c["title"] for c in body["data"]] == ["B"]
        assert "2023" in body["archive"]

    def test_newsline_current_is_latest_active_issue(self, admin_client, anon_client):
        assert anon_client.get("/api/newsline/current").get_json()["data"] is None

        admin_client.post("/api/newsline/create", json={"title": "Old", "month": 12, "year": 2023})
        admin_client.post("/api/newsline/create", json={"title": "New", "month": 2, "year": 2024})
        admin_client.post(
            "/api/newsline/create",
            json={"title": "Inactive", "month": 3, "year": 2024, "is_active": False},
        )

        assert anon_client.get("/api/newsline/current").get_json()["data"]["title"] == "New"
