"""
JSONPlaceholder Gateway - Forwarding Route Catalog
====================================================

What:  The single declaration of every forwarding route.
Why:   Handler registration, the GET / listing and the OpenAPI description
       are all derived from these entries, so they cannot drift apart.
How:   Each ForwardRoute names the method, the path template (identical
       inbound and upstream), what is forwarded, and its documentation.

Route Inventory:
    GET    /posts                 → /posts
    GET    /posts/{id}            → /posts/{id}
    GET    /posts/{id}/comments   → /posts/{id}/comments
    GET    /comments[?postId=]    → /comments[?postId=]
    POST   /posts                 → /posts               (body)
    PUT    /posts/{id}            → /posts/{id}          (body)
    PATCH  /posts/{id}            → /posts/{id}          (body)
    DELETE /posts/{id}            → /posts/{id}
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from app.schemas.gateway import ErrorResponse, PostPayload


@dataclass(frozen=True)
class ForwardRoute:
    """
    One inbound route and the upstream call it maps onto.

    Attributes:
        method:          HTTP method, used both inbound and upstream
        path:            Path template, e.g. "/posts/{id}"
        name:            Unique operation name (also the OpenAPI operationId)
        summary:         One-line description, shown in GET / and the docs
        description:     Longer description for the docs
        error_phrase:    Value of "error" in the failure body
        path_params:     Names of {placeholders} in path
        query_params:    Inbound query parameters forwarded when non-empty
        has_body:        Whether the JSON body is forwarded
        success_status:  Fixed success status; None relays the upstream's
        returns_list:    Documents the success body as an array
    """

    method: str
    path: str
    name: str
    summary: str
    description: str
    error_phrase: str
    path_params: Tuple[str, ...] = ()
    query_params: Tuple[str, ...] = ()
    has_body: bool = False
    success_status: Optional[int] = None
    returns_list: bool = False

    # ── Upstream request construction ─────────────────────────────────────

    def upstream_path(self, path_values: Mapping[str, str]) -> str:
        """Substitute path values verbatim. No coercion or validation."""
        return self.path.format(**{key: path_values[key] for key in self.path_params})

    def upstream_params(self, query: Mapping[str, str]) -> Dict[str, str]:
        """Keep only the forwarded query parameters that carry a value."""
        return {key: query[key] for key in self.query_params if query.get(key)}

    # ── Documentation ─────────────────────────────────────────────────────

    @property
    def listing_key(self) -> str:
        """Key used in the GET / endpoint listing, e.g. "GET /comments?postId={postId}"."""
        key = f"{self.method} {self.path}"
        if self.query_params:
            key += "?" + "&".join(f"{q}={{{q}}}" for q in self.query_params)
        return key

    @property
    def documented_status(self) -> int:
        return self.success_status or 200

    def openapi_extra(self) -> Dict[str, Any]:
        """
        Parameters and request body for the OpenAPI operation.

        The endpoint reads everything from the raw Request, so FastAPI
        cannot infer these; they are supplied here instead.
        """
        parameters: List[Dict[str, Any]] = [
            {
                "in": "path",
                "name": name,
                "required": True,
                "schema": {"type": "string"},
                "description": "Post ID",
            }
            for name in self.path_params
        ]
        parameters += [
            {
                "in": "query",
                "name": name,
                "required": False,
                "schema": {"type": "string"},
                "description": "Post ID to filter comments",
            }
            for name in self.query_params
        ]

        extra: Dict[str, Any] = {}
        if parameters:
            extra["parameters"] = parameters
        if self.has_body:
            extra["requestBody"] = {
                "required": True,
                "content": {
                    "application/json": {"schema": PostPayload.model_json_schema()},
                },
            }
        return extra

    def openapi_responses(self) -> Dict[int, Dict[str, Any]]:
        body_schema: Dict[str, Any] = (
            {"type": "array", "items": {"type": "object"}}
            if self.returns_list
            else {"type": "object"}
        )
        return {
            self.documented_status: {
                "description": "Upstream response, relayed unchanged",
                "content": {"application/json": {"schema": body_schema}},
            },
            404: {"description": "Upstream reported not found", "model": ErrorResponse},
            500: {"description": "Upstream unreachable or failed", "model": ErrorResponse},
        }


FORWARD_ROUTES: Tuple[ForwardRoute, ...] = (
    ForwardRoute(
        method="GET",
        path="/posts",
        name="list_posts",
        summary="Get all posts",
        description="Retrieve all posts from JSONPlaceholder",
        error_phrase="Failed to fetch posts",
        returns_list=True,
    ),
    ForwardRoute(
        method="GET",
        path="/posts/{id}",
        name="get_post",
        summary="Get a specific post",
        description="Retrieve a post by ID from JSONPlaceholder",
        error_phrase="Failed to fetch post",
        path_params=("id",),
    ),
    ForwardRoute(
        method="GET",
        path="/posts/{id}/comments",
        name="list_post_comments",
        summary="Get comments for a post",
        description="Retrieve all comments for a post by ID from JSONPlaceholder",
        error_phrase="Failed to fetch comments",
        path_params=("id",),
        returns_list=True,
    ),
    ForwardRoute(
        method="GET",
        path="/comments",
        name="list_comments",
        summary="Get comments by post ID",
        description="Retrieve comments, optionally filtered by post ID, from JSONPlaceholder",
        error_phrase="Failed to fetch comments",
        query_params=("postId",),
        returns_list=True,
    ),
    ForwardRoute(
        method="POST",
        path="/posts",
        name="create_post",
        summary="Create a new post",
        description="Create a new post in JSONPlaceholder",
        error_phrase="Failed to create post",
        has_body=True,
        success_status=201,
    ),
    ForwardRoute(
        method="PUT",
        path="/posts/{id}",
        name="replace_post",
        summary="Update a post (full)",
        description="Update all fields of a post by ID in JSONPlaceholder",
        error_phrase="Failed to update post",
        path_params=("id",),
        has_body=True,
    ),
    ForwardRoute(
        method="PATCH",
        path="/posts/{id}",
        name="patch_post",
        summary="Update a post (partial)",
        description="Update specific fields of a post by ID in JSONPlaceholder",
        error_phrase="Failed to patch post",
        path_params=("id",),
        has_body=True,
    ),
    ForwardRoute(
        method="DELETE",
        path="/posts/{id}",
        name="delete_post",
        summary="Delete a post",
        description="Delete a post by ID from JSONPlaceholder",
        error_phrase="Failed to delete post",
        path_params=("id",),
    ),
)


def endpoint_listing() -> Dict[str, str]:
    """Map of "METHOD /path" to summary for every forwarding route, in declaration order."""
    return {route.listing_key: route.summary for route in FORWARD_ROUTES}
