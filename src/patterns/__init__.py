"""
Padrões GoF implementados para o sistema de pedidos
"""

from .singleton import Singleton, OrderManager
from .bridge import OrderImplementation, FoodOrder, DrinkOrder, Order, Food, Drink
from .visitor import OrderVisitor, CostCalculator
from .factory import PedidoFactory, FoodFactory, DrinkFactory, MenuPedidos

__all__ = [
    # Singleton Pattern
    'Singleton',
    'OrderManager',

    # Bridge Pattern
    'OrderImplementation',
    'FoodOrder',
    'DrinkOrder',
    'Order',
    'Food',
    'Drink',

    # Visitor Pattern
    'OrderVisitor',
    'CostCalculator',

    # Factory Method Pattern
    'PedidoFactory',
    'FoodFactory',
    'DrinkFactory',
    'MenuPedidos',
]
