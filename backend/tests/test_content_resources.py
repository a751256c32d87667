import io


class TestProvincials:
    def test_only_one_current_holder_per_title(self, admin_client, anon_client):
        first = admin_client.post("/api/provincials/create", json={
            "name": "Fr. First", "title": "provincial", "is_current": True,
        }).get_json()["id"]
        admin_client.post("/api/provincials/create", json={
            "name": "Fr. Vice", "title": "vice_provincial", "is_current": True,
        })
        admin_client.post("/api/provincials/create", json={
            "name": "Fr. Second", "title": "provincial", "is_current": True,
        })

        data = anon_client.get("/api/provincials/list").get_json()["data"]
        current = {(p["name"], p["title"]) for p in data if p["is_current"]}

        assert current == {("Fr. Second", "provincial"), ("Fr. Vice", "vice_provincial")}
        assert anon_client.get("/api/provincials/current").get_json()["data"]["name"] == "Fr. Second"
        assert anon_client.get(f"/api/provincials/get?id={first}").get_json()["data"]["is_current"] is False

    def test_title_must_be_known(self, admin_client):
        response = admin_client.post("/api/provincials/create", json={"name": "X", "title": "bishop"})

        assert response.status_code == 400
        assert response.get_json()["field"] == "title"


class TestStrenna:
    def test_new_active_strenna_deactivates_same_year(self, admin_client, anon_client):
        admin_client.post("/api/strenna/create", json={"year": 2024, "title": "Old", "content": "a"})
        admin_client.post("/api/strenna/create", json={"year": 2023, "title": "Past", "content": "b"})
        admin_client.post("/api/strenna/create", json={"year": 2024, "title": "New", "content": "c"})

        public = anon_client.get("/api/strenna/list").get_json()["data"]

        assert [s["title"] for s in public] == ["New", "Past"]
        assert anon_client.get("/api/strenna/current").get_json()["data"]["title"] == "New"


class TestCouncil:
    def test_facets_and_filters(self, admin_client, anon_client):
        for name, dimension in [("A", "Youth"), ("B", "Youth"), ("C", "Formation")]:
            admin_client.post("/api/council/create", json={
                "name": name, "role": "Councillor", "dimension": dimension,
            })
        admin_client.post("/api/council/create", json={
            "name": "D", "role": "Councillor", "dimension": "Mission", "is_active": False,
        })

        body = anon_client.get("/api/council/list?dimension=Youth").get_json()

        assert [m["name"] for m in body["data"]] == ["A", "B"]
        assert body["dimensions"] == [
            {"value": "Formation", "count": 1},
            {"value": "Youth", "count": 2},
        ]
        assert body["commissions"] == []


class TestMessages:
    def test_author_is_derived_from_title(self, admin_client):
        data = admin_client.post("/api/messages/create", json={
            "title": "Fr. John Doe, Provincial", "content": "Greetings",
        }).get_json()["data"]

        assert data["author_name"] == "Fr. John Doe"
        assert data["author_title"] == "Provincial"

    def test_explicit_author_is_kept(self, admin_client):
        data = admin_client.post("/api/messages/create", json={
            "title": "Easter, Vicar", "content": "x", "author_name": "Someone",
        }).get_json()["data"]

        assert data["author_name"] == "Someone"
        assert data["author_title"] == "Vicar"


class TestBirthdayWishes:
    def test_invalid_colour_falls_back(self, admin_client):
        data = admin_client.post("/api/birthday/create", json={
            "name": "Br. Paul", "date_of_birth": "1980-04-02", "background_color": "purple",
        }).get_json()["data"]

        assert data["background_color"] == "#6B46C1"
        assert data["date_of_birth"] == "1980-04-02"

    def test_date_of_birth_must_be_a_date(self, admin_client):
        response = admin_client.post("/api/birthday/create", json={
            "name": "Br. Paul", "date_of_birth": "second of april",
        })

        assert response.status_code == 400
        assert response.get_json()["field"] == "date_of_birth"


class TestBanners:
    def test_type_is_a_tagged_variant(self, admin_client):
        response = admin_client.post("/api/banners/create", json={"type": "popup"})

        assert response.status_code == 400
        assert response.get_json()["error"] == "Valid type (hero or flash_news) is required"

    def test_type_filter_and_image_urls(self, admin_client, anon_client):
        admin_client.post("/api/banners/create", json={"type": "hero", "image": "slide.jpg"})
        admin_client.post("/api/banners/create", json={"type": "flash_news", "content": "News!"})

        heroes = anon_client.get("/api/banners/list?type=hero").get_json()["data"]

        assert len(heroes) == 1
        assert heroes[0]["image"] == "/uploads/images/slide.jpg"


class TestQuickLinksAndGallery:
    def test_quick_link_url_must_be_absolute(self, admin_client):
        bad = admin_client.post("/api/quick_links/create", json={"title": "Vatican", "url": "vatican"})
        good = admin_client.post(
            "/api/quick_links/create", json={"title": "Vatican", "url": "https://www.vatican.va"}
        )

        assert bad.status_code == 400
        assert good.status_code == 200

    def test_gallery_categories(self, admin_client, anon_client):
        for title, category in [("a", "Events"), ("b", "Events"), ("c", "Youth"), ("d", None)]:
            admin_client.post("/api/gallery/create", json={
                "title": title, "type": "photo", "file_path": f"{title}.jpg", "category": category,
            })

        body = anon_client.get("/api/gallery/categories.php").get_json()

        assert body["data"] == [{"value": "Events", "count": 2}, {"value": "Youth", "count": 1}]


class TestSettings:
    def test_upsert_and_read(self, admin_client, anon_client):
        assert anon_client.get("/api/settings/get?key=site_name").get_json()["data"] == {
            "site_name": None
        }

        admin_client.post("/api/settings/update", json={"key": "site_name", "value": "Province"})
        admin_client.put("/api/settings/update", json={"key": "site_name", "value": "Our Province"})
        admin_client.post("/api/settings/update", json={"key": "about", "value": "Hello"})

        assert anon_client.get("/api/settings/get").get_json()["data"] == {
            "about": "Hello",
            "site_name": "Our Province",
        }

    def test_key_is_required(self, admin_client):
        response = admin_client.post("/api/settings/update", json={"value": "x"})

        assert response.status_code == 400
        assert response.get_json()["error"] == "Setting key is required"

    def test_body_must_be_an_object(self, admin_client):
        response = admin_client.post("/api/settings/update", json=[1])

        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid JSON body"


class TestDashboard:
    def test_counts(self, admin_client):
        admin_client.post("/api/news/create", json={"title": "A", "content": "x", "is_published": True})
        admin_client.post("/api/news/create", json={"title": "B", "content": "x"})
        admin_client.post("/api/houses/create", json={"name": "House"})

        stats = admin_client.get("/api/dashboard/stats").get_json()["data"]

        assert stats["news"] == 2
        assert stats["published_news"] == 1
        assert stats["houses"] == 1
        assert stats["recent_activity"] >= 3

    def test_requires_admin(self, client):
        assert client.get("/api/dashboard/stats").status_code == 401


class TestUpload:
    def test_image_upload(self, app, admin_client):
        response = admin_client.post(
            "/api/upload/image",
            data={"image": (io.BytesIO(b"\x89PNG fake"), "photo.png")},
            content_type="multipart/form-data",
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body["url"].startswith("/uploads/images/")
        assert body["filename"].endswith(".png")
        assert admin_client.get(body["url"]).status_code == 200

    def test_rejects_other_file_types(self, admin_client):
        response = admin_client.post(
            "/api/upload/image",
            data={"image": (io.BytesIO(b"MZ"), "tool.exe")},
            content_type="multipart/form-data",
        )

        assert response.status_code == 400

    def test_rejects_large_files(self, app, admin_client):
        app.config["MAX_UPLOAD_SIZE"] = 10

        response = admin_client.post(
            "/api/upload/image",
            data={"image": (io.BytesIO(b"x" * 11), "big.jpg")},
            content_type="multipart/form-data",
        )

        assert response.status_code == 400
