from dataclasses import dataclass
from pathlib import Path

from src.config.settings import settings


@dataclass(frozen=True)
class CheckerConfig:
    node_endpoints: tuple[str, ...]
    chunk_size: int
    keys_file: Path
    results_dir: Path
    webhook_url: str | None = None

    @classmethod
    def from_settings(cls) -> 'CheckerConfig':
        return cls(
            node_endpoints=tuple(settings.node_endpoints),
            chunk_size=settings.chunk_size,
            keys_file=settings.keys_file,
            results_dir=settings.results_dir,
            webhook_url=settings.webhook_url,
        )
