"""
Controllers do padrão MVC para o sistema de pedidos
"""

from .pedido_controller import PedidoController

__all__ = [
    'PedidoController'
]
