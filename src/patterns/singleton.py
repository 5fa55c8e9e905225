"""
Padrão Singleton para o gerenciador de pedidos
"""
import logging
import threading

logger = logging.getLogger(__name__)


class Singleton(type):
    """Metaclass que limita cada classe a uma instância por processo

    Cada classe criada com esta metaclass recebe seu próprio lock e sua
    própria referência de instância.
    """

    def __init__(cls, name, bases, namespace):
        super().__init__(name, bases, namespace)
        cls._instance = None
        cls._instance_lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                # A referência só é publicada depois do __init__ terminar
                if cls._instance is None:
                    cls._instance = super().__call__(*args, **kwargs)
                    logger.debug("Instância única de %s criada", cls.__name__)
                instance = cls._instance
        return instance

    def has_instance(cls) -> bool:
        """Indica se a instância já foi criada"""
        return cls._instance is not None

    def reset_instance(cls):
        """Descarta a instância atual (uso em testes)"""
        with cls._instance_lock:
            cls._instance = None


class OrderManager(metaclass=Singleton):
    """Gerenciador de pedidos, único por processo"""

    @classmethod
    def get_instance(cls) -> "OrderManager":
        """Retorna a instância única, criando-a no primeiro acesso"""
        return cls()
