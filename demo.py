"""
Demonstração em linha de comando: Singleton, Bridge e Visitor
"""
import logging

from src.config import configurar_logging
from src.patterns.bridge import Drink, DrinkOrder, Food, FoodOrder, Order
from src.patterns.singleton import OrderManager
from src.patterns.visitor import CostCalculator, OrderVisitor

logger = logging.getLogger(__name__)


def main() -> int:
    """Executa a demonstração de Singleton, Bridge e Visitor"""
    configurar_logging()

    order_manager = OrderManager.get_instance()
    logger.debug("OrderManager obtido: %r", order_manager)

    # Bridge: cada pedido recebe sua implementação concreta
    food_order: Order = Food(FoodOrder())
    drink_order: Order = Drink(DrinkOrder())

    food_order.place_order()
    drink_order.place_order()

    # Visitor: o tipo do pedido escolhe a visita
    cost_calculator: OrderVisitor = CostCalculator()
    food_order.accept(cost_calculator)
    drink_order.accept(cost_calculator)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
