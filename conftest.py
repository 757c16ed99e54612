import pytest


@pytest.fixture(autouse=True)
def isolated_local_store(settings, tmp_path):
    """Every test gets its own on-device store and the database backend."""
    settings.SYNC = {
        **settings.SYNC,
        "REMOTE_BACKEND": "orm",
        "LOCAL_STORE_DIR": tmp_path / "local_store",
        "CALENDAR_PROVIDER": "",
    }
