from __future__ import annotations

import asyncio
from typing import Any
from typing import Dict
from typing import Optional
from typing import Tuple

import aiohttp
from aiohttp import ClientSession
from aiohttp import ClientTimeout

from hijri_calendar import LOGGER
from hijri_calendar.utils.retry import TRANSIENT_STATUS_CODES
from hijri_calendar.utils.retry import RetryPolicy
from hijri_calendar.utils.retry import SleepFunc
from hijri_calendar.utils.retry import TransientHTTPError
from hijri_calendar.utils.retry import retry_async


class HttpJsonClient:
    """
    Thin aiohttp wrapper shared by the HTTP adapters.

    The session is opened on first use and kept until :meth:`close`. A
    transient status is raised as :class:`TransientHTTPError` so the retry
    loop can see it; every other status is handed back with its body.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: SleepFunc = asyncio.sleep,
        session: Optional[ClientSession] = None,
    ):
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy()
        self.sleep = sleep
        self._session = session

    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=self.timeout))
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get_once(self, url: str, params: Optional[Dict[str, Any]]) -> Tuple[int, Any]:
        async with self.session().get(url, params=params) as response:
            if response.status in TRANSIENT_STATUS_CODES:
                raise TransientHTTPError(response.status, url)
            try:
                payload = await response.json(content_type=None)
            except (aiohttp.ContentTypeError, ValueError):
                LOGGER.warning(f"Non-JSON body from {url} (status {response.status})")
                payload = None
            return response.status, payload

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        retry: bool = True,
    ) -> Tuple[int, Any]:
        """GET ``url`` and return ``(status, decoded body)``.

        Raises:
            TransientHTTPError, aiohttp.ClientError, asyncio.TimeoutError:
                when the transient failure outlasts the retry budget
        """
        if not retry:
            return await self._get_once(url, params)
        return await retry_async(
            lambda: self._get_once(url, params),
            policy=self.retry_policy,
            sleep=self.sleep,
            description=f"GET {url}",
        )
