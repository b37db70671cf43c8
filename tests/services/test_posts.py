"""Tests for PostService — listing, lookups, and taxonomies."""

from pathlib import Path

import pytest

from dnfolio.config.settings import DnfolioSettings
from dnfolio.infrastructure.site import Site
from dnfolio.services.posts import PostService
from tests.helpers import write_post, write_raw


def _keys(items: list[dict]) -> list[str]:
    return [f"{item['category']}/{item['slug']}" for item in items]


@pytest.fixture
def service(site: Site) -> PostService:
    return PostService(site)


class TestListPosts:
    @pytest.mark.usefixtures("sample_posts")
    def test_sorted_and_published(self, service: PostService) -> None:
        result = service.list_posts()
        assert result.ok
        assert result.data["count"] == 3
        assert _keys(result.data["items"]) == [
            "tech/001-hello",
            "tech/002-rust",
            "diary/2024-01-01",
        ]

    @pytest.mark.usefixtures("sample_posts")
    def test_wire_shape(self, service: PostService) -> None:
        first = service.list_posts().data["items"][0]
        assert first == {
            "title": "Hello",
            "slug": "001-hello",
            "description": "First post",
            "createdAt": "2024-01-03",
            "updatedAt": None,
            "category": "tech",
            "tags": ["python", "web"],
            "published": True,
        }

    def test_empty_root(self, service: PostService) -> None:
        result = service.list_posts()
        assert result.ok
        assert result.data == {"count": 0, "items": []}

    @pytest.mark.usefixtures("sample_posts")
    def test_filter_category(self, service: PostService) -> None:
        result = service.list_posts(category="diary")
        assert _keys(result.data["items"]) == ["diary/2024-01-01"]

    @pytest.mark.usefixtures("sample_posts")
    def test_filter_tag(self, service: PostService) -> None:
        result = service.list_posts(tag="python")
        assert _keys(result.data["items"]) == ["tech/001-hello", "tech/002-rust"]

    @pytest.mark.usefixtures("sample_posts")
    def test_limit(self, service: PostService) -> None:
        assert _keys(service.list_posts(limit=1).data["items"]) == ["tech/001-hello"]
        assert service.list_posts(limit=0).data["items"] == []

    def test_same_timestamp_tie_break(self, service: PostService, content_root: Path) -> None:
        write_post(content_root, "b", "same", created="2024-05-01")
        write_post(content_root, "a", "same", created="2024-05-01")
        write_post(content_root, "a", "zzz", created="2024-05-01")
        keys = _keys(service.list_posts().data["items"])
        assert keys == ["a/zzz", "a/same", "b/same"]

    def test_datetime_ordering_across_offsets(self, service: PostService, content_root: Path) -> None:
        for slug, created in (("tokyo", "2024-01-01T08:00:00+09:00"), ("utc", "2024-01-01T00:00:00Z")):
            write_raw(
                content_root,
                f"tech/{slug}/index.md",
                f"---\ntitle: {slug}\ncreatedAt: \"{created}\"\npublished: true\n---\n",
            )
        keys = _keys(service.list_posts().data["items"])
        assert keys == ["tech/utc", "tech/tokyo"]

    def test_skipped_files_become_warnings(self, service: PostService, sample_posts: Path) -> None:
        write_raw(sample_posts, "tech/broken/index.md", "---\ntitle: [\n---\n")
        result = service.list_posts()
        assert result.ok
        assert result.data["count"] == 3
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Skipped tech/broken/index.md: yaml")
        assert result.meta == {
            "content_root": str(sample_posts),
            "indexed": 4,
            "skipped": 1,
        }

    def test_missing_content_root(self, tmp_path: Path) -> None:
        service = PostService(Site(DnfolioSettings.from_cli(site_root=tmp_path)))
        result = service.list_posts()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONTENT_ROOT_MISSING"

    def test_rescans_each_call(self, service: PostService, content_root: Path) -> None:
        assert service.list_posts().data["count"] == 0
        write_post(content_root, "tech", "late")
        assert service.list_posts().data["count"] == 1


class TestGetPost:
    @pytest.mark.usefixtures("sample_posts")
    def test_found(self, service: PostService) -> None:
        result = service.get_post("tech", "001-hello")
        assert result.ok
        assert result.data["title"] == "Hello"
        assert result.data["content"] == "# Hello\n\nWelcome.\n"
        assert result.data["path"] == "tech/001-hello/index.md"

    @pytest.mark.usefixtures("sample_posts")
    def test_neighbours(self, service: PostService) -> None:
        middle = service.get_post("tech", "002-rust").data
        assert middle["prev"] == {"title": "Hello", "url": "/blog/tech/001-hello/"}
        assert middle["next"] == {"title": "New Year", "url": "/blog/diary/2024-01-01/"}

    @pytest.mark.usefixtures("sample_posts")
    def test_neighbours_at_edges(self, service: PostService) -> None:
        assert service.get_post("tech", "001-hello").data["prev"] is None
        assert service.get_post("diary", "2024-01-01").data["next"] is None

    @pytest.mark.usefixtures("sample_posts")
    def test_not_found(self, service: PostService) -> None:
        result = service.get_post("tech", "nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "Not found : nope"
        assert result.error.detail == {"slug": "nope", "category": "tech"}

    @pytest.mark.usefixtures("sample_posts")
    def test_wrong_category(self, service: PostService) -> None:
        result = service.get_post("diary", "001-hello")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    @pytest.mark.usefixtures("sample_posts")
    def test_unpublished_is_not_found(self, service: PostService) -> None:
        result = service.get_post("tech", "003-draft")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_invalid_post(self, service: PostService, content_root: Path) -> None:
        write_raw(content_root, "tech/broken/index.md", "---\ncreatedAt: 2024-01-01\npublished: true\n---\n")
        result = service.get_post("tech", "broken")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POST"
        assert result.error.detail["reason"] == "frontmatter"
        assert result.error.detail["path"] == "tech/broken/index.md"


class TestFindPost:
    @pytest.mark.usefixtures("sample_posts")
    def test_by_slug(self, service: PostService) -> None:
        result = service.find_post("002-rust")
        assert result.ok
        assert result.op == "find_post"
        assert result.data["category"] == "tech"

    def test_newest_wins_across_categories(self, service: PostService, content_root: Path) -> None:
        write_post(content_root, "old", "shared", title="Old", created="2023-01-01")
        write_post(content_root, "new", "shared", title="New", created="2024-01-01")
        assert service.find_post("shared").data["title"] == "New"

    def test_skips_unpublished_match(self, service: PostService, content_root: Path) -> None:
        write_post(content_root, "a", "shared", title="Draft", created="2024-06-01", published=False)
        write_post(content_root, "b", "shared", title="Live", created="2024-01-01")
        assert service.find_post("shared").data["title"] == "Live"

    @pytest.mark.usefixtures("sample_posts")
    def test_not_found(self, service: PostService) -> None:
        result = service.find_post("nope")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "Not found : nope"

    def test_only_invalid_match(self, service: PostService, content_root: Path) -> None:
        write_raw(content_root, "tech/broken/index.md", "---\ntitle: [\n---\n")
        result = service.find_post("broken")
        assert result.error is not None
        assert result.error.code == "INVALID_POST"


class TestTaxonomies:
    @pytest.mark.usefixtures("sample_posts")
    def test_tags(self, service: PostService) -> None:
        result = service.list_tags()
        assert result.ok
        assert result.data["items"] == [
            {"name": "python", "count": 2, "posts": ["tech/001-hello", "tech/002-rust"]},
            {"name": "life", "count": 1, "posts": ["diary/2024-01-01"]},
            {"name": "rust", "count": 1, "posts": ["tech/002-rust"]},
            {"name": "web", "count": 1, "posts": ["tech/001-hello"]},
        ]

    def test_duplicate_tag_counted_once(self, service: PostService, content_root: Path) -> None:
        write_post(content_root, "tech", "x", tags=["a", "a"])
        assert service.list_tags().data["items"] == [{"name": "a", "count": 1, "posts": ["tech/x"]}]

    @pytest.mark.usefixtures("sample_posts")
    def test_categories(self, service: PostService) -> None:
        data = service.list_categories().data
        assert data["count"] == 2
        assert [c["name"] for c in data["categories"]] == ["diary", "tech"]
        tech = data["categories"][1]
        assert tech["count"] == 2
        assert [p["slug"] for p in tech["posts"]] == ["001-hello", "002-rust"]

    def test_archive_months(self, service: PostService, content_root: Path) -> None:
        write_post(content_root, "tech", "jan", created="2024-01-10")
        write_post(content_root, "tech", "mar", created="2024-03-02")
        write_post(content_root, "diary", "mar2", created="2024-03-20")
        archive = service.list_categories().data["archive"]
        assert [m["month"] for m in archive] == ["2024-03", "2024-01"]
        assert archive[0]["count"] == 2
        assert archive[0]["posts"][0] == {
            "category": "diary",
            "slug": "mar2",
            "title": "mar2",
            "url": "/blog/diary/mar2/",
        }


class TestWireTimestamps:
    def test_unquoted_timestamps_served_as_written(
        self, service: PostService, content_root: Path
    ) -> None:
        write_post(content_root, "tech", "zulu", created="2024-01-03T05:00:00Z")
        write_post(content_root, "tech", "spaced", created="2024-01-02 10:00:00")
        items = service.list_posts().data["items"]
        assert [i["createdAt"] for i in items] == ["2024-01-03T05:00:00Z", "2024-01-02 10:00:00"]
