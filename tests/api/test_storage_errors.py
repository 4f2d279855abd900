"""Storage failures over HTTP — the real get_db against a database with no tables.

Invariants:
    - StorageError → 503 with the standard error envelope
    - Reads and writes fail the same way
"""


async def test_list_posts_without_schema_is_503(unmigrated_client):
    res = await unmigrated_client.get("/api/v1/posts")
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert error["category"] == "database"


async def test_create_category_without_schema_is_503(unmigrated_client):
    res = await unmigrated_client.post(
        "/api/v1/categories", json={"name": "Python", "slug": "python"},
    )
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "STORAGE_ERROR"


async def test_get_post_by_slug_without_schema_is_503(unmigrated_client):
    res = await unmigrated_client.get("/api/v1/posts/by-slug/hello-world")
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "STORAGE_ERROR"
