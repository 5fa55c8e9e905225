"""
Controller para pedidos (padrão MVC)
Expõe Bridge e Visitor via HTTP
"""
import io
import logging
from contextlib import redirect_stdout
from typing import Callable, List

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from src.patterns.bridge import Order
from src.patterns.factory import MenuPedidos
from src.patterns.visitor import CostCalculator

logger = logging.getLogger(__name__)


class SaidaPedidoResponse(BaseModel):
    """Schema de resposta com as linhas impressas pela operação"""
    tipo: str = Field(..., description="Tipo do pedido", examples=["food", "drink"])
    operacao: str = Field(..., description="Operação executada", examples=["place_order", "accept"])
    saida: List[str] = Field(..., description="Linhas escritas no console pela operação")


class TiposPedidoResponse(BaseModel):
    """Schema com os tipos de pedido disponíveis"""
    tipos: List[str]
    total: int


def capturar_saida(acao: Callable[[], None]) -> List[str]:
    """Executa a ação e devolve as linhas que ela imprimiu"""
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        acao()
    return buffer.getvalue().splitlines()


class PedidoController:
    """Controller para operações de pedidos"""

    def __init__(self):
        self.router = APIRouter(prefix="/pedidos", tags=["Pedidos"])
        self.menu = MenuPedidos()
        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.get("/tipos", response_model=TiposPedidoResponse)
        async def listar_tipos():
            """Lista os tipos de pedido disponíveis"""
            tipos = self.menu.get_tipos_disponiveis()
            return TiposPedidoResponse(tipos=tipos, total=len(tipos))

        @self.router.post("/{tipo}", response_model=SaidaPedidoResponse)
        async def fazer_pedido(tipo: str):
            """
            Cria e registra um pedido do tipo informado

            **Parâmetros de Path:**
            - **tipo**: 'food' ou 'drink'

            **Comportamento:**
            - O pedido (abstração) delega o registro para sua implementação (Bridge)
            """
            return self.registrar_pedido(tipo)

        @self.router.post("/{tipo}/custo", response_model=SaidaPedidoResponse)
        async def calcular_custo(tipo: str):
            """
            Calcula o custo de um pedido do tipo informado

            **Comportamento:**
            - O pedido aceita o CostCalculator, que executa a visita correspondente (Visitor)
            """
            return self.calcular_custo_pedido(tipo)

    def _criar_pedido(self, tipo: str) -> Order:
        pedido = self.menu.criar_pedido(tipo)
        if pedido is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Tipo de pedido '{tipo}' não encontrado. "
                       f"Disponíveis: {', '.join(self.menu.get_tipos_disponiveis())}"
            )
        return pedido

    def registrar_pedido(self, tipo: str) -> SaidaPedidoResponse:
        pedido = self._criar_pedido(tipo)
        logger.info("Registrando pedido do tipo %s", tipo)
        saida = capturar_saida(pedido.place_order)
        return SaidaPedidoResponse(tipo=tipo.lower(), operacao="place_order", saida=saida)

    def calcular_custo_pedido(self, tipo: str) -> SaidaPedidoResponse:
        pedido = self._criar_pedido(tipo)
        calculadora = CostCalculator()
        logger.info("Calculando custo do pedido do tipo %s", tipo)
        saida = capturar_saida(lambda: pedido.accept(calculadora))
        return SaidaPedidoResponse(tipo=tipo.lower(), operacao="accept", saida=saida)
