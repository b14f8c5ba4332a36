from fastapi import APIRouter, Query

from schemas.cart_schemas import ReplaceCartSchema, UpdateQuantitySchema
from services.cart_service import create_cart, get_cart, add_item, remove_item, replace_items, set_item_quantity, clear_cart

router = APIRouter(prefix="/api/carts")


@router.post("/", status_code=201)
async def create_new_cart():
    # creates an empty cart
    return await create_cart()


@router.get("/{cid}")
async def fetch_cart(cid: str):
    # get cart with the products it holds
    return await get_cart(cid)


@router.post("/{cid}/product/{pid}")
async def add_cart_item(cid: str, pid: str, quantity: int = Query(1, ge=1)):
    # adds item to cart. if item already in cart, increase its quantity
    cart = await add_item(cid, pid, quantity)
    return {"message": "Product added to cart and stock updated", "cart": cart}


@router.delete("/{cid}/products/{pid}")
async def delete_cart_item(cid: str, pid: str):
    cart = await remove_item(cid, pid)
    return {"message": "Product removed from cart and stock restored", "cart": cart}


@router.put("/{cid}")
async def replace_cart_items(cid: str, request: ReplaceCartSchema):
    # replaces the whole item list, stock is left as is
    cart = await replace_items(cid, request.products)
    return {"message": "Cart fully updated", "cart": cart}


@router.put("/{cid}/products/{pid}")
async def update_cart_item(cid: str, pid: str, request: UpdateQuantitySchema):
    cart = await set_item_quantity(cid, pid, request.quantity)
    return {"message": "Quantity updated and stock adjusted", "cart": cart}


@router.delete("/{cid}")
async def empty_cart(cid: str):
    cart = await clear_cart(cid)
    return {"message": "Cart emptied and stock restored", "cart": cart}
