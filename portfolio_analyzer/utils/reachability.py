"""
Reachability preflight for the analysis target.

Checks the target URL answers over HTTP before a browser is launched, so an
unreachable development server fails fast with a clear message.
"""

import asyncio

import aiohttp

from .constants import DEFAULT_PREFLIGHT_TIMEOUT, DEFAULT_USER_AGENT
from .log import get_logger
from ..exceptions import TargetUnreachableError


logger = get_logger("reachability")


async def check_reachable(
    url: str,
    timeout: float = DEFAULT_PREFLIGHT_TIMEOUT
) -> int:
    """
    Issue a GET request against the target URL.
    
    Args:
        url: Target URL
        timeout: Total request timeout in seconds
        
    Returns:
        HTTP status code of the response
        
    Raises:
        TargetUnreachableError: If the server cannot be reached or answers
            with a status of 400 or above
    """
    try:
        async with aiohttp.ClientSession(
            headers={"User-Agent": DEFAULT_USER_AGENT}
        ) as session:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=timeout),
                allow_redirects=True
            ) as response:
                if response.status >= 400:
                    raise TargetUnreachableError(url, f"HTTP {response.status}")
                logger.debug(f"Preflight {url}: HTTP {response.status}")
                return response.status
    except aiohttp.ClientError as e:
        raise TargetUnreachableError(url, str(e) or type(e).__name__) from e
    except asyncio.TimeoutError as e:
        raise TargetUnreachableError(url, f"no answer within {timeout}s") from e
