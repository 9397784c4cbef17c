"""
Runtime configuration.
Defaults can be overridden from the environment and then from CLI flags.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from revelio.core.beautifier import BeautifyOptions
from revelio.core.exceptions import InputError


DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


def _default_headers() -> Dict[str, str]:
    return {
        'Accept': 'application/javascript, text/javascript, */*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.9',
    }


@dataclass
class Config:
    timeout: float = 30.0
    max_concurrent: int = 5
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=_default_headers)
    beautify: BeautifyOptions = field(default_factory=BeautifyOptions)

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.timeout <= 0:
            raise InputError(f"Timeout must be positive, got {self.timeout}")
        if self.max_concurrent < 1:
            raise InputError(f"Concurrency must be at least 1, got {self.max_concurrent}")

    def request_headers(self) -> Dict[str, str]:
        headers = dict(self.headers)
        headers['User-Agent'] = self.user_agent
        return headers

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        config = cls()

        timeout = env.get('REVELIO_TIMEOUT')
        if timeout:
            config.timeout = _parse_number(timeout, float, 'REVELIO_TIMEOUT')

        concurrency = env.get('REVELIO_CONCURRENCY')
        if concurrency:
            config.max_concurrent = _parse_number(concurrency, int, 'REVELIO_CONCURRENCY')

        user_agent = env.get('REVELIO_USER_AGENT')
        if user_agent:
            config.user_agent = user_agent

        config.validate()
        return config


def _parse_number(raw: str, kind, name: str):
    try:
        return kind(raw)
    except ValueError:
        raise InputError(f"Invalid value for {name}: {raw!r}")


def get_default_config() -> Config:
    return Config.from_env()
