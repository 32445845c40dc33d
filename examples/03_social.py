"""
Social service - Follow a user and page through followers
"""
import asyncio

from urlzip import RPCClient, RPCConfig, SocialService, PaginationParams


async def main():
    config = RPCConfig(
        base_url="http://localhost:3010/trpc/lambda",
        access_token="your-token"
    )

    async with RPCClient(config) as client:
        social = SocialService(client)

        await social.follow(123)
        status = await social.check_follow_status(123)
        print(f"Following: {status}")

        page = await social.get_followers(123, PaginationParams(page=2, page_size=20))
        print(f"Followers page 2: {page}")


if __name__ == "__main__":
    asyncio.run(main())
