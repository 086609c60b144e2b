"""HTTP server exposing the DAO coin order-book endpoints.

Built on ``aiohttp``. The blockchain view is supplied by the caller.

Endpoints
---------
GET  /                                           Liveness text
POST /api/v0/get-dao-coin-limit-orders           Orders on both sides of a coin pair
POST /api/v0/get-transactor-dao-coin-limit-orders  Orders placed by a transactor
POST /api/v0/validate-dao-coin-limit-order       Scale a new order and check balance

Usage:
    server = OrderBookServer(view, ServerConfig.default())
    await server.start()
    ...
    await server.stop()
"""

import logging
import sys
from typing import Optional

from aiohttp import web

from ..shared.errors import ExchangeArithmeticError
from ..shared.types import Coin
from .config import ServerConfig
from .error import ApiError, DeserializeError, ErrorResponse
from .orderbook import OrderBookService
from .types import (
    DAOCoinLimitOrderRequest,
    GetDAOCoinLimitOrdersRequest,
    GetDAOCoinLimitOrdersResponse,
    GetTransactorDAOCoinLimitOrdersRequest,
)
from .view import UniversalView

logger = logging.getLogger(__name__)

SERVICE_KEY = web.AppKey("orderbook_service", OrderBookService)


def configure_logging(log_level: str = "INFO") -> None:
    """Send package logs to stdout at the given level."""
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("dao_exchange")
    package_logger.setLevel(log_level.upper())
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def _error_response(status: int, message: str) -> web.Response:
    return web.json_response(ErrorResponse(error=message).to_dict(), status=status)


@web.middleware
async def error_middleware(request: web.Request, handler):
    """Map API and arithmetic errors to JSON error responses."""
    try:
        return await handler(request)
    except ExchangeArithmeticError as e:
        return _error_response(400, f"{request.path}: {e}")
    except ApiError as e:
        if e.status >= 500:
            logger.error(f"{request.path}: {e}")
        return _error_response(e.status, f"{request.path}: {e}")


async def _read_json(request: web.Request) -> dict:
    try:
        body = await request.json()
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and oversized integer literals
        raise DeserializeError(f"Problem parsing request body: {e}") from e
    if not isinstance(body, dict):
        raise DeserializeError("Request body must be a JSON object")
    return body


async def index(_request: web.Request) -> web.Response:
    return web.Response(text="Your DeSo node is running!\n")


async def get_dao_coin_limit_orders(request: web.Request) -> web.Response:
    """
    POST /api/v0/get-dao-coin-limit-orders
    Body: {"DAOCoin1CreatorPublicKeyBase58Check": "...",
           "DAOCoin2CreatorPublicKeyBase58Check": "DESO"}
    """
    request_data = GetDAOCoinLimitOrdersRequest.from_dict(await _read_json(request))
    service = request.app[SERVICE_KEY]
    orders = service.get_limit_orders(
        Coin(request_data.dao_coin1_creator_public_key),
        Coin(request_data.dao_coin2_creator_public_key),
    )
    return web.json_response(GetDAOCoinLimitOrdersResponse(orders=orders).to_dict())


async def get_transactor_dao_coin_limit_orders(request: web.Request) -> web.Response:
    """
    POST /api/v0/get-transactor-dao-coin-limit-orders
    Body: {"TransactorPublicKeyBase58Check": "..."}
    """
    request_data = GetTransactorDAOCoinLimitOrdersRequest.from_dict(await _read_json(request))
    service = request.app[SERVICE_KEY]
    orders = service.get_transactor_limit_orders(request_data.transactor_public_key)
    return web.json_response(GetDAOCoinLimitOrdersResponse(orders=orders).to_dict())


async def validate_dao_coin_limit_order(request: web.Request) -> web.Response:
    """
    POST /api/v0/validate-dao-coin-limit-order
    Body: {"TransactorPublicKeyBase58Check": "...",
           "BuyingDAOCoinCreatorPublicKeyBase58Check": "...",
           "SellingDAOCoinCreatorPublicKeyBase58Check": "DESO",
           "Price": "1.5", "Quantity": "10", "OperationType": "BID"}
    """
    request_data = DAOCoinLimitOrderRequest.from_dict(await _read_json(request))
    service = request.app[SERVICE_KEY]
    params = service.prepare_limit_order(request_data)
    service.validate_transactor_selling_coin_balance(params)
    return web.json_response(params.to_dict())


def create_app(view: UniversalView, config: Optional[ServerConfig] = None) -> web.Application:
    """Build the aiohttp application for the order-book endpoints."""
    config = config or ServerConfig.default()
    app = web.Application(
        middlewares=[error_middleware],
        client_max_size=config.max_body_bytes,
    )
    app[SERVICE_KEY] = OrderBookService(view, network=config.network)
    app.router.add_get("/", index)
    app.router.add_post("/api/v0/get-dao-coin-limit-orders", get_dao_coin_limit_orders)
    app.router.add_post(
        "/api/v0/get-transactor-dao-coin-limit-orders", get_transactor_dao_coin_limit_orders
    )
    app.router.add_post(
        "/api/v0/validate-dao-coin-limit-order", validate_dao_coin_limit_order
    )
    return app


class OrderBookServer:
    """Runs the order-book application on a TCP site."""

    def __init__(self, view: UniversalView, config: Optional[ServerConfig] = None):
        self._config = config or ServerConfig.default()
        self._app = create_app(view, self._config)
        self._runner: Optional[web.AppRunner] = None

    @property
    def app(self) -> web.Application:
        return self._app

    async def start(self) -> None:
        configure_logging(self._config.log_level)
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._config.host, self._config.port)
        await site.start()
        logger.info(f"API listening on http://{self._config.host}:{self._config.port}")

    async def stop(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            logger.info("API server stopped")
