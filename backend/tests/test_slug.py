from province_portal.extensions import db
from province_portal.models.news_item import NewsItem
from province_portal.utils.slug import slugify, unique_slug


class TestSlugify:
    def test_lowercases_and_hyphenates(self):
        assert slugify("Our Vision & Mission") == "our-vision-mission"

    def test_collapses_and_trims_separators(self):
        assert slugify("  --Hello,   World!--  ") == "hello-world"

    def test_strips_accents(self):
        assert slugify("Café Déjà Vu") == "cafe-deja-vu"

    def test_only_symbols_gives_empty(self):
        assert slugify("!!!") == ""
        assert slugify(None) == ""


class TestUniqueSlug:
    """Collision handling against live rows only."""

    def _news(self, slug, deleted=False):
        item = NewsItem(title=slug, slug=slug, content="body")
        if deleted:
            item.soft_delete()
        db.session.add(item)
        db.session.commit()
        return item

    def test_free_slug_is_used_as_is(self, app):
        with app.app_context():
            assert unique_slug(NewsItem, "Fresh Title", fallback_prefix="news") == "fresh-title"

    def test_collision_gets_timestamp_suffix(self, app):
        with app.app_context():
            self._news("hello-world")
            slug = unique_slug(
                NewsItem, "Hello World", fallback_prefix="news", clock=lambda: 1700000000
            )
            assert slug == "hello-world-1700000000"

    def test_second_collision_in_same_second_gets_counter(self, app):
        with app.app_context():
            self._news("hello-world")
            self._news("hello-world-1700000000")
            slug = unique_slug(
                NewsItem, "Hello World", fallback_prefix="news", clock=lambda: 1700000000
            )
            assert slug == "hello-world-1700000000-2"

    def test_soft_deleted_rows_do_not_block_a_slug(self, app):
        with app.app_context():
            self._news("archived", deleted=True)
            assert unique_slug(NewsItem, "Archived", fallback_prefix="news") == "archived"

    def test_empty_derivation_uses_prefix(self, app):
        with app.app_context():
            slug = unique_slug(NewsItem, "???", fallback_prefix="news", clock=lambda: 42)
            assert slug == "news-42"

    def test_own_row_is_excluded(self, app):
        with app.app_context():
            item = self._news("mine")
            assert unique_slug(
                NewsItem, "Mine", fallback_prefix="news", exclude_id=item.id
            ) == "mine"
