"""
Tests para el filtro de orígenes CORS

El patrón de orígenes solo aplica cuando está configurado, sin importar APP_ENV.
"""

import re
from unittest.mock import patch

from app import main


class TestAllowedOrigins:
    """Tests para is_allowed_origin"""

    @patch.object(main, 'CORS_ORIGIN_REGEX', None)
    @patch.object(main, 'CORS_ORIGINS', ['http://localhost:3000'])
    def test_explicit_origins_only(self):
        """Sin patrón configurado, un dominio de vercel no se acepta"""
        assert main.is_allowed_origin('http://localhost:3000') is True
        assert main.is_allowed_origin('https://anything.vercel.app') is False
        assert main.is_allowed_origin('') is False

    @patch.object(main, 'CORS_ORIGIN_REGEX', re.compile(r'https://.*\.example\.com'))
    @patch.object(main, 'CORS_ORIGINS', ['http://localhost:3000'])
    def test_configured_regex(self):
        """El patrón configurado acepta solo los orígenes que coinciden"""
        assert main.is_allowed_origin('https://preview.example.com') is True
        assert main.is_allowed_origin('https://anything.vercel.app') is False
