"""
JSONPlaceholder Gateway - Forwarding Route Tests
==================================================

What:  End-to-end tests for the eight forwarding routes.
How:   Requests go through the real FastAPI app (ASGITransport); the
       upstream is a respx mock.

What we test:
    ✅ Status and body are relayed unchanged on success
    ✅ POST /posts answers 201
    ✅ postId is forwarded only when given
    ✅ Path ids are forwarded verbatim, even non-numeric ones
    ✅ Bodies are forwarded byte for byte, malformed ones included
    ✅ Upstream 404 → 404, unreachable upstream → 500, same error shape
    ✅ Ids that cannot form an upstream URL get the route error, not a crash
"""

import httpx
import pytest

from app.routes.catalog import FORWARD_ROUTES

JSON = {"Content-Type": "application/json"}


class TestReadRoutes:

    @pytest.mark.asyncio
    async def test_list_posts(self, test_client, upstream, post):
        upstream.get("/posts").respond(200, json=[post])

        response = await test_client.get("/posts")

        assert response.status_code == 200
        assert response.json() == [post]

    @pytest.mark.asyncio
    async def test_get_post_mirrors_upstream(self, test_client, upstream, post):
        upstream.get("/posts/1").respond(200, json=post)

        response = await test_client.get("/posts/1")

        assert response.status_code == 200
        assert response.json() == post

    @pytest.mark.asyncio
    async def test_post_comments(self, test_client, upstream, comments):
        route = upstream.get("/posts/3/comments").respond(200, json=comments)

        response = await test_client.get("/posts/3/comments")

        assert route.called
        assert response.json() == comments

    @pytest.mark.asyncio
    async def test_comments_without_filter(self, test_client, upstream, comments):
        route = upstream.get("/comments").respond(200, json=comments)

        response = await test_client.get("/comments")

        assert response.status_code == 200
        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    async def test_comments_with_post_id(self, test_client, upstream, comments):
        route = upstream.get("/comments").respond(200, json=comments)

        response = await test_client.get("/comments", params={"postId": "3"})

        assert response.json() == comments
        assert dict(route.calls.last.request.url.params) == {"postId": "3"}

    @pytest.mark.asyncio
    async def test_comments_empty_post_id_is_not_forwarded(self, test_client, upstream):
        route = upstream.get("/comments").respond(200, json=[])

        await test_client.get("/comments?postId=")

        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    async def test_other_query_params_are_dropped(self, test_client, upstream):
        route = upstream.get("/comments").respond(200, json=[])

        await test_client.get("/comments", params={"postId": "2", "email": "x@y.z"})

        assert dict(route.calls.last.request.url.params) == {"postId": "2"}

    @pytest.mark.asyncio
    async def test_non_numeric_id_passes_through(self, test_client, upstream):
        route = upstream.get("/posts/abc").respond(404, json={})

        response = await test_client.get("/posts/abc")

        assert route.called
        assert response.status_code == 404


class TestWriteRoutes:

    @pytest.mark.asyncio
    async def test_create_post_returns_201(self, test_client, upstream):
        body = b'{"title":"a","body":"b","userId":1}'
        created = {"title": "a", "body": "b", "userId": 1, "id": 101}
        route = upstream.post("/posts").respond(201, json=created)

        response = await test_client.post("/posts", content=body, headers=JSON)

        assert response.status_code == 201
        assert response.json() == created
        assert route.calls.last.request.content == body

    @pytest.mark.asyncio
    async def test_create_post_is_201_even_if_upstream_says_200(self, test_client, upstream):
        upstream.post("/posts").respond(200, json={"id": 101})

        response = await test_client.post("/posts", json={"title": "a"})

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_create_post_without_body_sends_empty_object(self, test_client, upstream):
        route = upstream.post("/posts").respond(201, json={"id": 101})

        await test_client.post("/posts")

        assert route.calls.last.request.content == b"{}"

    @pytest.mark.asyncio
    async def test_malformed_body_is_left_to_upstream(self, test_client, upstream):
        route = upstream.post("/posts").respond(400, json={})

        response = await test_client.post("/posts", content=b"{not json", headers=JSON)

        assert route.calls.last.request.content == b"{not json"
        assert response.status_code == 400
        assert response.json()["error"] == "Failed to create post"

    @pytest.mark.asyncio
    async def test_put_post(self, test_client, upstream, post):
        route = upstream.put("/posts/1").respond(200, json=post)

        response = await test_client.put("/posts/1", json=post)

        assert response.status_code == 200
        assert response.json() == post
        assert route.calls.last.request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_patch_post(self, test_client, upstream, post):
        patched = dict(post, title="patched")
        route = upstream.patch("/posts/1").respond(200, json=patched)

        response = await test_client.patch(
            "/posts/1", content=b'{"title":"patched"}', headers=JSON
        )

        assert response.json() == patched
        assert route.calls.last.request.content == b'{"title":"patched"}'

    @pytest.mark.asyncio
    async def test_delete_post(self, test_client, upstream):
        upstream.delete("/posts/1").respond(200, json={})

        response = await test_client.delete("/posts/1")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_delete_with_empty_upstream_body(self, test_client, upstream):
        upstream.delete("/posts/1").respond(204)

        response = await test_client.delete("/posts/1")

        assert response.status_code == 204
        assert response.content == b""


# (method, inbound path, upstream path, expected "error" phrase)
FAILURE_CASES = [
    ("GET", "/posts", "/posts", "Failed to fetch posts"),
    ("GET", "/posts/7", "/posts/7", "Failed to fetch post"),
    ("GET", "/posts/7/comments", "/posts/7/comments", "Failed to fetch comments"),
    ("GET", "/comments", "/comments", "Failed to fetch comments"),
    ("POST", "/posts", "/posts", "Failed to create post"),
    ("PUT", "/posts/7", "/posts/7", "Failed to update post"),
    ("PATCH", "/posts/7", "/posts/7", "Failed to patch post"),
    ("DELETE", "/posts/7", "/posts/7", "Failed to delete post"),
]


class TestFailureTranslation:

    def test_every_route_has_a_failure_case(self):
        covered = {(method, path) for method, _, path, _ in FAILURE_CASES}
        declared = {
            (r.method, r.upstream_path({"id": "7"})) for r in FORWARD_ROUTES
        }
        assert covered == declared

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,upstream_path,phrase", FAILURE_CASES)
    async def test_upstream_404_is_relayed(
        self, test_client, upstream, method, path, upstream_path, phrase
    ):
        upstream.route(method=method, path=upstream_path).respond(404, json={})

        response = await test_client.request(method, path)

        assert response.status_code == 404
        assert response.json() == {
            "error": phrase,
            "message": "Request failed with status code 404",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,upstream_path,phrase", FAILURE_CASES)
    async def test_unreachable_upstream_is_500(
        self, test_client, upstream, method, path, upstream_path, phrase
    ):
        upstream.route(method=method, path=upstream_path).mock(
            side_effect=httpx.ConnectError("getaddrinfo failed")
        )

        response = await test_client.request(method, path)

        assert response.status_code == 500
        assert response.json() == {"error": phrase, "message": "getaddrinfo failed"}

    @pytest.mark.asyncio
    async def test_upstream_5xx_status_is_kept(self, test_client, upstream):
        upstream.get("/posts").respond(502, text="Bad Gateway")

        response = await test_client.get("/posts")

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to fetch posts"

    @pytest.mark.asyncio
    async def test_non_json_upstream_body_is_500(self, test_client, upstream):
        upstream.get("/posts/1").respond(200, text="<html></html>")

        response = await test_client.get("/posts/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to fetch post"
        assert body["message"]

    @pytest.mark.asyncio
    async def test_upstream_error_body_is_not_leaked(self, test_client, upstream):
        upstream.get("/posts/1").respond(500, json={"stack": "secret trace"})

        response = await test_client.get("/posts/1")

        assert "secret trace" not in response.text


# Ids that decode to characters httpx refuses to put in a URL
UNBUILDABLE_URL_CASES = [
    ("GET", "/posts/a%0Ab", "Failed to fetch post"),
    ("GET", "/posts/a%0Ab/comments", "Failed to fetch comments"),
    ("PUT", "/posts/a%0Ab", "Failed to update post"),
    ("PATCH", "/posts/a%0Ab", "Failed to patch post"),
    ("DELETE", "/posts/a%0Ab", "Failed to delete post"),
]


class TestUnbuildableUpstreamUrl:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,phrase", UNBUILDABLE_URL_CASES)
    async def test_control_character_in_id_is_route_error(
        self, test_client, upstream, method, path, phrase
    ):
        response = await test_client.request(method, path)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == phrase
        assert body["message"]
        assert upstream.calls.call_count == 0
