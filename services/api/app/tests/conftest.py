import pytest
from app.storage import memory_store

@pytest.fixture(autouse=True)
def clean_store():
    memory_store.reset()
    yield
    memory_store.reset()
