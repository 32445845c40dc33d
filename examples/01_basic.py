"""
Basic usage - Compress text into a URL-safe token
"""
import asyncio
from urlzip import Compressor


async def main():
    text = "Hello, World! " * 20

    # Async methods load the backend on first use
    token = await Compressor.compress_async(text)
    print(f"Original: {len(text)} chars")
    print(f"Token:    {len(token)} chars")
    print(f"URL:      https://example.com/share?state={token}")

    # Backend is ready now, sync methods work too
    assert Compressor.decompress(token) == text
    print("Round-trip OK")


if __name__ == "__main__":
    asyncio.run(main())
