"""API endpoints for the pairswap exchange."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from pairswap.api.exchange import Exchange, get_default_exchange
from pairswap.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    ApprovalRequest,
    AssetResponse,
    BalanceResponse,
    CreatePoolRequest,
    CreatePoolResponse,
    IssueAssetRequest,
    QuoteResponse,
    RemoveLiquidityRequest,
    RemoveLiquidityResponse,
    SwapRequest,
    SwapResponse,
)
from pairswap.models.info import PoolState
from pairswap.pools.addressing import pair_label

router = APIRouter()

# Account path parameters must be 20-byte hex addresses
AccountPath = Annotated[str, Path(pattern=r"^0x[a-fA-F0-9]{40}$")]


def get_exchange() -> Exchange:
    """Dependency provider for the exchange instance.

    Override this in tests to inject a fresh exchange:
        app.dependency_overrides[get_exchange] = lambda: Exchange()
    """
    return get_default_exchange()


# --- Assets ---


@router.post("/assets", status_code=201)
def issue_asset(
    request: IssueAssetRequest,
    exchange: Exchange = Depends(get_exchange),
) -> AssetResponse:
    """Issue a fixed-supply asset minted to the owner."""
    with exchange.locked():
        token = exchange.issue_asset(request.name, request.symbol, request.supply, request.owner)
        return AssetResponse(
            address=token.address,
            name=token.name,
            symbol=token.symbol,
            decimals=token.decimals,
            total_supply=token.total_supply,
        )


@router.get("/assets/{address}/balances/{account}")
def get_balance(
    address: str,
    account: AccountPath,
    exchange: Exchange = Depends(get_exchange),
) -> BalanceResponse:
    with exchange.locked():
        token = exchange.get_asset(address)
        return BalanceResponse(account=account, balance=token.balance_of(account))


@router.post("/assets/{address}/approvals", status_code=204)
def approve(
    address: str,
    request: ApprovalRequest,
    exchange: Exchange = Depends(get_exchange),
) -> None:
    """Set an allowance, typically for a pool address before trading."""
    with exchange.locked():
        exchange.get_asset(address).approve(request.owner, request.spender, request.amount)


# --- Pools ---


@router.post("/pools", status_code=201)
def create_pool(
    request: CreatePoolRequest,
    exchange: Exchange = Depends(get_exchange),
) -> CreatePoolResponse:
    with exchange.locked():
        asset_x = exchange.get_asset(request.asset_x)
        asset_y = exchange.get_asset(request.asset_y)
        pair_id = exchange.router.create_pool(asset_x, asset_y)
        return CreatePoolResponse(
            pair_id=pair_id,
            pair_label=pair_label(asset_x.name, asset_y.name),
            pool_address=exchange.router.get_pool_address(pair_id),
        )


@router.get("/pools/{pair_id}")
def get_pool(pair_id: str, exchange: Exchange = Depends(get_exchange)) -> PoolState:
    with exchange.locked():
        return exchange.router.get_pool_state(pair_id)


@router.get("/pools/{pair_id}/liquidity/{account}")
def get_liquidity_balance(
    pair_id: str,
    account: AccountPath,
    exchange: Exchange = Depends(get_exchange),
) -> BalanceResponse:
    with exchange.locked():
        pool = exchange.router.get_pool(pair_id)
        return BalanceResponse(account=account, balance=pool.balance_of(account))


@router.post("/pools/{pair_id}/liquidity")
def add_liquidity(
    pair_id: str,
    request: AddLiquidityRequest,
    exchange: Exchange = Depends(get_exchange),
) -> AddLiquidityResponse:
    with exchange.locked():
        liquidity = exchange.router.add_liquidity(
            request.caller, pair_id, request.amount_a, request.amount_b
        )
        pool = exchange.router.get_pool(pair_id)
        return AddLiquidityResponse(
            liquidity=liquidity,
            reserve_a=pool.reserve_a,
            reserve_b=pool.reserve_b,
            total_supply=pool.total_supply,
        )


@router.post("/pools/{pair_id}/withdrawals")
def remove_liquidity(
    pair_id: str,
    request: RemoveLiquidityRequest,
    exchange: Exchange = Depends(get_exchange),
) -> RemoveLiquidityResponse:
    with exchange.locked():
        amount_a, amount_b = exchange.router.remove_liquidity(
            request.caller, pair_id, request.liquidity
        )
        pool = exchange.router.get_pool(pair_id)
        return RemoveLiquidityResponse(
            amount_a=amount_a,
            amount_b=amount_b,
            reserve_a=pool.reserve_a,
            reserve_b=pool.reserve_b,
            total_supply=pool.total_supply,
        )


@router.post("/pools/{pair_id}/swaps")
def swap(
    pair_id: str,
    request: SwapRequest,
    exchange: Exchange = Depends(get_exchange),
) -> SwapResponse:
    with exchange.locked():
        amount_a, amount_b = exchange.router.swap(
            request.caller, pair_id, request.amount_a_in, request.amount_b_in
        )
        pool = exchange.router.get_pool(pair_id)
        return SwapResponse(
            amount_a=amount_a,
            amount_b=amount_b,
            reserve_a=pool.reserve_a,
            reserve_b=pool.reserve_b,
        )


@router.get("/pools/{pair_id}/quote")
def quote(
    pair_id: str,
    amount_a_in: int = Query(default=0, ge=0),
    amount_b_in: int = Query(default=0, ge=0),
    exchange: Exchange = Depends(get_exchange),
) -> QuoteResponse:
    """Price a swap against current reserves without executing it."""
    with exchange.locked():
        result = exchange.router.get_pool(pair_id).quote(amount_a_in, amount_b_in)
        a_to_b = amount_a_in > 0
        return QuoteResponse(
            amount_in=result.amount_in,
            amount_out=result.amount_out,
            reserve_a_after=result.reserve_in_after if a_to_b else result.reserve_out_after,
            reserve_b_after=result.reserve_out_after if a_to_b else result.reserve_in_after,
        )
