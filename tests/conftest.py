import pytest

from src.patterns.singleton import OrderManager


@pytest.fixture
def fresh_singletons():
    """Garante que o próximo acesso cria a instância única do zero."""
    OrderManager.reset_instance()
    yield
    OrderManager.reset_instance()
