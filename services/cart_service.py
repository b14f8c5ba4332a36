import logging
from exceptions import InsufficientStock, NotFound
from microservices.cart_microservice import find_cart, find_cart_item, insert_cart, save_cart, serialize_cart
from microservices.product_microservice import find_product, find_products, save_product_stock
from mongomanager import canonical_product_id


logger = logging.getLogger(__name__)

# none of the operations below are transactional: the product and the cart are
# two separate writes and nothing is rolled back when the second one fails.


async def _load_cart(cart_id: str):
    cart = await find_cart(cart_id)
    if not cart:
        raise NotFound("Cart not found")
    return cart


async def create_cart():
    cart = await insert_cart({"products": []})
    logger.info("Created cart %s", cart["_id"])
    return serialize_cart(cart)


async def get_cart(cart_id: str):
    # returns the cart with every product_id swapped for the product itself
    cart = await _load_cart(cart_id)
    products = await find_products([str(item["product_id"]) for item in cart["products"]])
    result = serialize_cart(cart)
    result["products"] = [{"product": products.get(canonical_product_id(item["product_id"])), "quantity": item["quantity"]}
                          for item in cart["products"]]
    return result


async def add_item(cart_id: str, product_id: str, delta: int = 1):
    # adds an item to the cart or increments an existing one, taking the units out of stock
    cart = await _load_cart(cart_id)
    product = await find_product(product_id)
    if not product:
        raise NotFound("Product not found")
    if product["stock"] < delta:
        raise InsufficientStock("Not enough stock for this product")
    product_id = str(product["_id"])

    product["stock"] -= delta
    await save_product_stock(product)

    item = find_cart_item(cart, product_id)
    if item:
        item["quantity"] += delta
    else:
        cart["products"].append({"product_id": product_id, "quantity": delta})
    await save_cart(cart)
    return serialize_cart(cart)


async def remove_item(cart_id: str, product_id: str):
    cart = await _load_cart(cart_id)
    item = find_cart_item(cart, product_id)
    if not item:
        raise NotFound("Product not found in cart")

    product = await find_product(product_id)
    if product:
        product["stock"] += item["quantity"]
        await save_product_stock(product)
    else:
        logger.warning(
            "Product %s no longer exists, stock not restored for cart %s", product_id, cart_id)

    cart["products"] = [entry for entry in cart["products"] if entry is not item]
    await save_cart(cart)
    return serialize_cart(cart)


async def replace_items(cart_id: str, items):
    # overwrites the item list as sent, stock is not touched
    cart = await _load_cart(cart_id)
    cart["products"] = [{"product_id": canonical_product_id(item.product_id), "quantity": item.quantity}
                        for item in items]
    await save_cart(cart)
    return serialize_cart(cart)


async def set_item_quantity(cart_id: str, product_id: str, quantity: int):
    cart = await _load_cart(cart_id)
    item = find_cart_item(cart, product_id)
    if not item:
        raise NotFound("Product not found in cart")

    # positive diff takes more stock, negative diff gives it back
    diff = quantity - item["quantity"]
    product = await find_product(product_id)
    if not product:
        raise NotFound("Product not found")

    if diff > 0:
        if product["stock"] < diff:
            raise InsufficientStock(
                "Not enough stock to increase the quantity")
        product["stock"] -= diff
    elif diff < 0:
        product["stock"] += abs(diff)
    await save_product_stock(product)

    item["quantity"] = quantity
    await save_cart(cart)
    return serialize_cart(cart)


async def clear_cart(cart_id: str):
    # empties the cart and gives every item's quantity back to its product
    cart = await _load_cart(cart_id)
    for item in cart["products"]:
        product = await find_product(str(item["product_id"]))
        if not product:
            logger.warning("Product %s no longer exists, stock not restored for cart %s",
                           item["product_id"], cart_id)
            continue
        product["stock"] += item["quantity"]
        await save_product_stock(product)

    cart["products"] = []
    await save_cart(cart)
    return serialize_cart(cart)
