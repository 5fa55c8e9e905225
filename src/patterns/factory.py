from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .bridge import Drink, DrinkOrder, Food, FoodOrder, Order


class PedidoFactory(ABC):
    """Factory Method interface para criação de pedidos"""

    @abstractmethod
    def criar_pedido(self) -> Order:
        pass


class FoodFactory(PedidoFactory):
    """Factory concreta para pedidos de comida"""

    def criar_pedido(self) -> Order:
        return Food(FoodOrder())


class DrinkFactory(PedidoFactory):
    """Factory concreta para pedidos de bebida"""

    def criar_pedido(self) -> Order:
        return Drink(DrinkOrder())


class MenuPedidos:
    """Factory para gerenciar criação de pedidos por tipo"""

    def __init__(self):
        self._factories: Dict[str, PedidoFactory] = {
            "food": FoodFactory(),
            "drink": DrinkFactory(),
        }

    def registrar_factory(self, tipo: str, factory: PedidoFactory):
        """Registra uma nova factory"""
        self._factories[tipo.lower()] = factory

    def criar_pedido(self, tipo: str) -> Optional[Order]:
        """Cria pedido usando a factory apropriada"""
        factory = self._factories.get(tipo.lower())
        if factory:
            return factory.criar_pedido()
        return None

    def get_tipos_disponiveis(self) -> List[str]:
        """Retorna tipos de pedido disponíveis"""
        return list(self._factories.keys())
