from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bridge import Drink, Food


class OrderVisitor(ABC):
    """Interface Visitor: uma operação por tipo concreto de pedido"""

    @abstractmethod
    def visit_food(self, food: "Food") -> None:
        pass

    @abstractmethod
    def visit_drink(self, drink: "Drink") -> None:
        pass


class CostCalculator(OrderVisitor):
    """Visitor concreto para cálculo de custo

    Ainda não calcula valores, apenas indica qual pedido foi visitado.
    """

    def visit_food(self, food: "Food") -> None:
        print("Calculating cost for food.")

    def visit_drink(self, drink: "Drink") -> None:
        print("Calculating cost for drink.")
