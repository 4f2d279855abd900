"""Categories API — list order, create, getById null, update, delete cascade."""


async def _create(client, name, slug, **extra):
    res = await client.post("/api/v1/categories", json={"name": name, "slug": slug, **extra})
    assert res.status_code == 201
    return res.json()


async def test_list_alphabetical(client):
    for name, slug in (("Web", "web"), ("Ai", "ai"), ("Mobile", "mobile")):
        await _create(client, name, slug)

    res = await client.get("/api/v1/categories")

    assert [c["name"] for c in res.json()] == ["Ai", "Mobile", "Web"]


async def test_create_returns_record(client):
    data = await _create(client, "Python", "python", description="Snakes")
    assert data["id"] > 0
    assert data == {"id": data["id"], "name": "Python", "slug": "python", "description": "Snakes"}


async def test_duplicate_slug_is_409(client):
    await _create(client, "Python", "python")
    res = await client.post("/api/v1/categories", json={"name": "Py", "slug": "python"})
    assert res.status_code == 409
    assert res.json()["error"]["message"] == "A category with this slug already exists"


async def test_name_over_fifty_chars_is_400(client):
    res = await client.post("/api/v1/categories", json={"name": "n" * 51, "slug": "n"})
    assert res.status_code == 400


async def test_get_by_id(client):
    created = await _create(client, "Python", "python")
    assert (await client.get(f"/api/v1/categories/{created['id']}")).json() == created
    missing = await client.get("/api/v1/categories/999")
    assert missing.status_code == 200
    assert missing.json() is None


async def test_update_partial(client):
    created = await _create(client, "Python", "python", description="Snakes")

    res = await client.put(f"/api/v1/categories/{created['id']}", json={"name": "Python 3"})

    assert res.status_code == 200
    assert res.json() == {**created, "name": "Python 3"}


async def test_update_missing_is_404(client):
    res = await client.put("/api/v1/categories/999", json={"name": "x"})
    assert res.status_code == 404


async def test_delete_cascades_to_posts(client):
    keep = await _create(client, "Keep", "keep")
    drop = await _create(client, "Drop", "drop")
    post = (await client.post(
        "/api/v1/posts",
        json={"title": "t", "content": "c", "slug": "p", "categoryIds": [keep["id"], drop["id"]]},
    )).json()

    res = await client.delete(f"/api/v1/categories/{drop['id']}")

    assert res.json() == {"success": True}
    assert (await client.get(f"/api/v1/categories/{drop['id']}")).json() is None
    assert (await client.get(f"/api/v1/posts/{post['id']}/categories")).json() == [keep["id"]]
