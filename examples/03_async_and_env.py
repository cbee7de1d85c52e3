"""
Async adapter with configuration from environment variables.

    HTTP_ADAPTER_TIMEOUT_MS=10000 HTTP_ADAPTER_LOG_ENABLED=true \
    HTTP_ADAPTER_LOG_FORMAT=json python examples/03_async_and_env.py
"""

import asyncio

from http_adapter import HttpAdapterFactory, load_from_env


async def main():
    config = load_from_env()
    print(f"timeout_ms={config.timeout_ms} logging={config.logging}")

    factory = HttpAdapterFactory(config)
    async with factory.create_async() as adapter:
        users, posts = await asyncio.gather(
            adapter.get("https://jsonplaceholder.typicode.com/users", {"id": [1, 2]}, options={"array_format": "repeat"}),
            adapter.get("https://jsonplaceholder.typicode.com/posts", {"userId": 1}),
        )
        print(f"{len(users)} users, {len(posts)} posts")


if __name__ == "__main__":
    asyncio.run(main())
