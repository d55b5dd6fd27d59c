from __future__ import annotations

from pathlib import Path

import pytest

from musemind.common.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        gemini_api_key="test-key",
        gemini_base_url="https://upstream.test/v1beta/models/gemini:generateContent",
        request_timeout=0.5,
        public_dir=str(tmp_path / "public"),
    )
