from __future__ import annotations

import app.config as config
import app.infrastructure.db.postgres as postgres
import app.presentation as presentation


def test_dotenv_is_loaded_only_by_config():
    assert hasattr(config, "load_dotenv")
    assert not hasattr(postgres, "load_dotenv")


def test_max_offset_is_bigint_max():
    assert config.MAX_OFFSET == 9223372036854775807


def test_presentation_package_has_no_export_list():
    assert not hasattr(presentation, "__all__")
