import logging

import aiohttp
from aiohttp import ClientTimeout

from src.common.clients import CHECKER_USER_AGENT
from src.common.typings import ValidatorStatus
from src.common.utils import format_error

logger = logging.getLogger(__name__)

MESSAGE_CARD_CONTEXT = 'https://schema.org/extensions'
THEME_COLOR_OK = '2DC72D'
THEME_COLOR_WARNING = 'FFA500'


class WebhookNotifier:
    def __init__(self, webhook_url: str, timeout: int) -> None:
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def send_summary(self, summary: dict, title: str) -> bool:
        """Posts the summary card. Delivery failures are logged only."""
        card = build_message_card(summary, title)
        try:
            async with aiohttp.ClientSession(timeout=ClientTimeout(total=self.timeout)) as session:
                async with session.post(
                    self.webhook_url,
                    json=card,
                    headers={'user-agent': CHECKER_USER_AGENT},
                ) as response:
                    response.raise_for_status()
        except Exception as e:
            logger.error('Failed to send webhook notification: %s', format_error(e))
            return False

        logger.info('Webhook notification sent')
        return True


def build_message_card(summary: dict, title: str) -> dict:
    facts = [{'name': str(key), 'value': str(value)} for key, value in summary.items()]
    return {
        '@type': 'MessageCard',
        '@context': MESSAGE_CARD_CONTEXT,
        'themeColor': _get_theme_color(summary),
        'summary': title,
        'title': title,
        'sections': [{'facts': facts}],
    }


def get_summary_title(validators_count: int) -> str:
    return f'Validator status ({validators_count} validators)'


def _get_theme_color(summary: dict) -> str:
    statuses = {s.value for s in ValidatorStatus}.intersection(summary)
    if statuses <= {ValidatorStatus.ACTIVE_ONGOING.value}:
        return THEME_COLOR_OK
    return THEME_COLOR_WARNING
