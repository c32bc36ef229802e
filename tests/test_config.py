"""
Tests para configuración de la aplicación

Valida que la configuración se cargue correctamente desde variables de entorno
y que los valores por defecto sean apropiados.
"""

from unittest.mock import patch
from app.core.config import Settings


class TestSettings:
    """Tests para Settings"""

    @patch.dict('os.environ', {
        'DATA_URL': 'https://list.example.com/data',
        'PACK_MULTIPLIER': '2.0',
        'REQUEST_TIMEOUT_SECONDS': '3.5',
    })
    def test_settings_loads_from_env(self):
        """Validar que Settings carga desde variables de entorno"""
        settings = Settings()

        assert settings.data_url == 'https://list.example.com/data'
        assert settings.pack_multiplier == 2.0
        assert settings.request_timeout_seconds == 3.5

    @patch.dict('os.environ', {}, clear=True)
    def test_settings_default_values(self):
        """Validar valores por defecto de configuración"""
        settings = Settings(_env_file=None)

        assert settings.pack_multiplier == 1.5
        assert settings.score_max == 250.0
        assert settings.score_min == 15.0
        assert settings.app_env == "development"
        assert settings.log_level == "INFO"

    @patch.dict('os.environ', {
        'SCORE_MAX': '500',
        'SCORE_MIN': '5',
    })
    def test_settings_score_bounds(self):
        """Validar que los límites de la curva se configuren correctamente"""
        settings = Settings()

        assert settings.score_max == 500.0
        assert settings.score_min == 5.0

    @patch.dict('os.environ', {}, clear=True)
    def test_settings_cors_origin_regex_default(self):
        """Sin CORS_ORIGIN_REGEX solo se aceptan los orígenes explícitos"""
        settings = Settings(_env_file=None)

        assert settings.cors_origin_regex is None

    @patch.dict('os.environ', {
        'APP_ENV': 'production',
        'CORS_ORIGIN_REGEX': r'https://.*\.example\.com',
    })
    def test_settings_cors_origin_regex_from_env(self):
        """Validar que el patrón de orígenes se cargue desde el entorno"""
        settings = Settings()

        assert settings.cors_origin_regex == r'https://.*\.example\.com'
