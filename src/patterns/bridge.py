"""
Padrão Bridge: separa o pedido (abstração) da forma de registrá-lo (implementação)
"""
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .visitor import OrderVisitor

logger = logging.getLogger(__name__)


class OrderImplementation(ABC):
    """Interface Implementor do padrão Bridge"""

    @abstractmethod
    def place_order(self) -> None:
        pass


class FoodOrder(OrderImplementation):
    """Implementação concreta para pedidos de comida"""

    def place_order(self) -> None:
        print("Placing food order.")


class DrinkOrder(OrderImplementation):
    """Implementação concreta para pedidos de bebida"""

    def place_order(self) -> None:
        print("Placing drink order.")


class Order(ABC):
    """Abstração do padrão Bridge

    Cada pedido é dono exclusivo da sua implementação, recebida na construção
    e nunca substituída.
    """

    def __init__(self, implementation: OrderImplementation):
        if implementation is None:
            raise ValueError("implementation é obrigatória")
        if not isinstance(implementation, OrderImplementation):
            raise TypeError(
                f"implementation deve ser OrderImplementation, "
                f"recebido {type(implementation).__name__}"
            )
        self._implementation = implementation

    @property
    def implementation(self) -> OrderImplementation:
        return self._implementation

    def place_order(self) -> None:
        """Delega o registro do pedido para a implementação"""
        logger.debug("%s delegando para %s", type(self).__name__, type(self._implementation).__name__)
        self._implementation.place_order()

    @abstractmethod
    def accept(self, visitor: "OrderVisitor") -> None:
        """Ponto de entrada do double dispatch do padrão Visitor"""
        pass


def _validar_visitor(visitor) -> None:
    if visitor is None:
        raise ValueError("visitor é obrigatório")


class Food(Order):
    """Pedido de comida"""

    def accept(self, visitor: "OrderVisitor") -> None:
        _validar_visitor(visitor)
        visitor.visit_food(self)


class Drink(Order):
    """Pedido de bebida"""

    def accept(self, visitor: "OrderVisitor") -> None:
        _validar_visitor(visitor)
        visitor.visit_drink(self)
