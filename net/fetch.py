"""네트워크 모듈 — URL에서 폰트/이미지 바이트를 가져온다 (블로킹 + asyncio).

재시도는 하지 않는다. 실패는 모두 FetchError로 전달된다.
"""

import asyncio
import logging

import requests

from errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def fetch_bytes(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """URL의 본문을 바이트로 반환한다 (블로킹)."""
    logger.info("가져오는 중: %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e
    logger.debug("수신 완료: %s (%d bytes)", url, len(resp.content))
    return resp.content


async def fetch_bytes_async(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """URL의 본문을 바이트로 반환한다 (asyncio)."""
    import aiohttp

    logger.info("가져오는 중: %s", url)
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
                resp.raise_for_status()
                data = await resp.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e
    logger.debug("수신 완료: %s (%d bytes)", url, len(data))
    return data
