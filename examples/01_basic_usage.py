"""
Basic HTTP Adapter Usage Examples

Demonstrates GET, POST, PUT, PATCH, DELETE calls and per-call options.
"""

from http_adapter import RequestsHttpAdapter, ArrayFormat, RequestOptions


BASE_URL = "https://jsonplaceholder.typicode.com"


def basic_get_request(adapter):
    """Simple GET request, body only."""
    print("\n=== Basic GET Request ===")

    post = adapter.get(f"{BASE_URL}/posts/1")
    print(f"Title: {post['title']}")


def get_with_array_params(adapter):
    """Arrays in query string."""
    print("\n=== GET with array params ===")

    for array_format in ArrayFormat:
        comments = adapter.get(
            f"{BASE_URL}/comments",
            {"postId": [1, 2]},
            options=RequestOptions(array_format=array_format),
        )
        print(f"{array_format.value}: {len(comments)} comments")


def post_with_json(adapter):
    """POST request with JSON body and full response."""
    print("\n=== POST with JSON ===")

    response = adapter.post(
        f"{BASE_URL}/posts",
        {"title": "My Post", "body": "This is the content", "userId": 1},
        options={"resolve_full_response": True},
    )
    print(f"Created: {response.body}")
    print(f"Content-Type: {response.headers.get('Content-Type')}")


def post_with_form(adapter):
    """POST request with form-urlencoded body."""
    print("\n=== POST with form ===")

    created = adapter.post(f"{BASE_URL}/posts", {"title": "Form Post"}, options={"content_type": "form"})
    print(f"Created: {created}")


def update_and_delete(adapter):
    """PUT, PATCH and DELETE."""
    print("\n=== PUT / PATCH / DELETE ===")

    print(adapter.put(f"{BASE_URL}/posts/1", {"id": 1, "title": "Updated Title", "userId": 1}))
    print(adapter.patch(f"{BASE_URL}/posts/1", {"title": "Patched"}))
    print(repr(adapter.delete(f"{BASE_URL}/posts/1", options={"parse_json": False})))


if __name__ == "__main__":
    print("=" * 50)
    print("HTTP Adapter - Basic Usage Examples")
    print("=" * 50)

    with RequestsHttpAdapter(timeout_ms=10000) as adapter:
        basic_get_request(adapter)
        get_with_array_params(adapter)
        post_with_json(adapter)
        post_with_form(adapter)
        update_and_delete(adapter)

    print("\n" + "=" * 50)
    print("All examples completed successfully!")
    print("=" * 50)
