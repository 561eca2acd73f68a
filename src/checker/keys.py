import json
import logging
from pathlib import Path

from eth_typing import HexStr

logger = logging.getLogger(__name__)


def load_public_keys(keys_file: Path) -> list[HexStr]:
    """
    Reads public keys from a json array of `{"pubkey": ...}` objects.
    An unreadable file results in an empty list.
    """
    try:
        with open(keys_file, 'r', encoding='utf-8') as f:
            keys = json.load(f)
    except (OSError, ValueError) as e:
        logger.error('Error reading file: %s. %s', keys_file, e)
        return []

    if not isinstance(keys, list):
        logger.error('Error reading file: %s. Expected a json array', keys_file)
        return []

    public_keys = []
    for index, key in enumerate(keys):
        if not isinstance(key, dict) or not key.get('pubkey'):
            logger.warning(
                'Skipping entry %d in %s: pubkey is missing. '
                'Batch ranges of the following keys are shifted',
                index,
                keys_file,
            )
            continue
        public_keys.append(HexStr(key['pubkey']))

    return public_keys
