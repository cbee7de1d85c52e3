"""
Error Handling Examples.

Every failure reaches the caller as exactly one adapter error.
"""

from http_adapter import (
    RequestsHttpAdapter,
    HttpStatusCodeError,
    ParseError,
    HttpTimeoutError,
    HttpRequestError,
    HttpGenericError,
)


def status_errors(adapter):
    print("\n=== Status errors ===")

    try:
        adapter.get("https://httpbin.org/status/404")
    except HttpStatusCodeError as e:
        print(f"{e.message}: not_found={e.is_not_found()} body={e.body!r}")


def parse_errors(adapter):
    print("\n=== Parse errors ===")

    try:
        adapter.get("https://httpbin.org/html")
    except ParseError as e:
        print(f"{e.message}; body starts with {e.response_body[:15]!r}")


def timeouts():
    print("\n=== Timeouts ===")

    with RequestsHttpAdapter(timeout_ms=500) as adapter:
        try:
            adapter.get("https://httpbin.org/delay/3")
        except HttpTimeoutError as e:
            print(e.message)


def network_errors(adapter):
    print("\n=== Network errors ===")

    try:
        adapter.post("http://127.0.0.1:9", {"ping": True})
    except HttpRequestError as e:
        print(f"Request failed: {e.request.as_dict()}")
    except HttpGenericError as e:
        print(f"Unexpected: {type(e.original_error).__name__}")


if __name__ == "__main__":
    with RequestsHttpAdapter() as adapter:
        status_errors(adapter)
        parse_errors(adapter)
        network_errors(adapter)
    timeouts()
