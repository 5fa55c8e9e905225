"""
Aplicação principal do Sistema de Pedidos
Implementa padrão MVC com padrões GoF
"""
import logging
from contextlib import asynccontextmanager

import uvicorn  # type: ignore
from fastapi import FastAPI

from src.config import APP_HOST, APP_PORT, APP_RELOAD, LOG_LEVEL, configurar_logging

# Controllers (padrão MVC)
from src.controllers.pedido_controller import PedidoController, capturar_saida

from src.patterns.bridge import Drink, DrinkOrder, Food, FoodOrder
from src.patterns.singleton import OrderManager
from src.patterns.visitor import CostCalculator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicialização da aplicação"""
    configurar_logging()
    logger.info("Iniciando Sistema de Pedidos...")
    OrderManager.get_instance()
    logger.info("Documentação disponível em: http://%s:%s/docs", APP_HOST, APP_PORT)
    yield
    logger.info("Sistema de Pedidos encerrado")


# Configuração da aplicação principal
app = FastAPI(
    title="Sistema de Pedidos",
    description="""
    Demonstração de pedidos de comida e bebida que contém:

    Padrões GoF Implementados:
    - 🔒 Singleton: Gerenciador único de pedidos
    - 🌉 Bridge: Pedido separado da sua implementação
    - 🧭 Visitor: Cálculo de custo por tipo de pedido
    - 🏭 Factory Method: Criação de pedidos por tipo

    Padrões Arquiteturais:
    - 🖥️ MVC: Separação de responsabilidades
    """,
    version="1.0.0",
    lifespan=lifespan,
)

pedido_controller = PedidoController()
app.include_router(pedido_controller.router)


@app.get("/")
async def root():
    """Endpoint raiz com informações do sistema"""
    return {
        "message": "🏪 Sistema de Pedidos - Padrões GoF",
        "version": "1.0.0",
        "padroes_implementados": {
            "singleton": "✅ Gerenciador de pedidos",
            "bridge": "✅ Pedidos de comida e bebida",
            "visitor": "✅ Cálculo de custo",
            "factory_method": "✅ Criação de pedidos",
            "mvc": "✅ Arquitetura MVC"
        },
        "endpoints": {
            "documentacao": "/docs",
            "pedidos": "/pedidos/*",
            "demonstracoes": "/demo/*",
        }
    }


@app.get("/health")
async def health_check():
    """Verifica saúde da aplicação"""
    return {
        "status": "healthy",
        "patterns": "implemented",
    }


@app.get("/demo/singleton")
async def demo_singleton():
    """Demonstração do padrão Singleton"""
    primeiro = OrderManager.get_instance()
    segundo = OrderManager.get_instance()

    return {
        "padrao": "Singleton Pattern",
        "descricao": "Uma única instância de OrderManager por processo",
        "exemplo": {
            "mesma_instancia": primeiro is segundo,
            "id_instancia": id(primeiro)
        },
        "beneficios": [
            "Ponto global de acesso",
            "Inicialização preguiçosa e thread-safe"
        ]
    }


@app.get("/demo/bridge")
async def demo_bridge():
    """Demonstração do padrão Bridge"""
    food = Food(FoodOrder())
    drink = Drink(DrinkOrder())

    return {
        "padrao": "Bridge Pattern",
        "descricao": "Abstração (Order) separada da implementação (OrderImplementation)",
        "exemplo": {
            "food": {
                "abstracao": type(food).__name__,
                "implementacao": type(food.implementation).__name__,
                "saida": capturar_saida(food.place_order)
            },
            "drink": {
                "abstracao": type(drink).__name__,
                "implementacao": type(drink.implementation).__name__,
                "saida": capturar_saida(drink.place_order)
            }
        },
        "beneficios": [
            "Abstração e implementação variam independentemente",
            "Novas implementações sem alterar os pedidos"
        ]
    }


@app.get("/demo/visitor")
async def demo_visitor():
    """Demonstração do padrão Visitor"""
    calculadora = CostCalculator()
    pedidos = [Food(FoodOrder()), Drink(DrinkOrder())]

    return {
        "padrao": "Visitor Pattern",
        "descricao": "Operações externas aos pedidos via double dispatch",
        "exemplo": {
            "visitor": type(calculadora).__name__,
            "saida": [
                linha
                for pedido in pedidos
                for linha in capturar_saida(lambda: pedido.accept(calculadora))
            ]
        },
        "beneficios": [
            "Novas operações sem modificar Food e Drink",
            "Comportamento escolhido pelo tipo concreto do pedido"
        ]
    }


if __name__ == "__main__":
    print("🏪 Iniciando Sistema de Pedidos...")
    print(f"📖 Acesse http://localhost:{APP_PORT}/docs para documentação")

    uvicorn.run(
        "main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=APP_RELOAD,
        log_level=LOG_LEVEL.lower()
    )
