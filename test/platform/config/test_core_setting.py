from pathlib import Path

import pytest

from src.platform.config.core_setting import Settings


pytestmark = pytest.mark.unit

ENV_EXAMPLE = Path(__file__).resolve().parents[3] / '.env.example'


class TestCorsOrigins:
    @pytest.fixture(autouse=True)
    def _no_cors_env(self, monkeypatch):
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

    def test_shipped_env_example_loads_with_wildcard_origin(self):
        settings = Settings(_env_file=ENV_EXAMPLE)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['*']

    @pytest.mark.parametrize(
        'raw, expected',
        [
            ('*', ['*']),
            (
                'https://a.example.com, https://b.example.com',
                ['https://a.example.com', 'https://b.example.com'],
            ),
            ('["https://a.example.com"]', ['https://a.example.com']),
            ('', ['*']),
        ],
    )
    def test_env_value_forms(self, monkeypatch, raw, expected):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', raw)

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == expected  # type: ignore[call-arg]
