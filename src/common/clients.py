import logging

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from eth_typing import HexStr

import src
from src.config.settings import NODE_SYNCING_PATH, VALIDATORS_BY_ID_PATH

logger = logging.getLogger(__name__)

CHECKER_USER_AGENT = f'Validator Status Checker {src.__version__}'


class BeaconClient:
    """
    Minimal beacon node api client.
    Every call is issued exactly once, the session timeout is the only limit.
    """

    def __init__(self, timeout: int) -> None:
        self.timeout = timeout
        self._session: ClientSession | None = None

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=ClientTimeout(total=self.timeout),
                headers={'user-agent': CHECKER_USER_AGENT},
            )
        return self._session

    async def get_syncing(self, endpoint: str) -> dict:
        return await self._fetch_json(get_node_url(endpoint, NODE_SYNCING_PATH))

    async def get_validators_by_ids(self, endpoint: str, public_keys: list[HexStr]) -> dict:
        url = get_node_url(endpoint, VALIDATORS_BY_ID_PATH)
        # error replies carry a json body, it is checked by the caller
        return await self._fetch_json(f'{url}?id={",".join(public_keys)}', raise_for_status=False)

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> 'BeaconClient':
        return self

    async def __aexit__(self, *args) -> None:  # type: ignore
        await self.close()

    async def _fetch_json(self, url: str, raise_for_status: bool = True) -> dict:
        logger.debug('GET %s', url)
        async with self.session.get(url) as response:
            if raise_for_status:
                response.raise_for_status()
            return await response.json(content_type=None)


def get_node_url(endpoint: str, path: str) -> str:
    if endpoint.startswith(('http://', 'https://')):
        return f'{endpoint.rstrip("/")}{path}'
    return f'http://{endpoint}{path}'
