import logging
from pymongo.errors import PyMongoError
from exceptions import PersistenceError
from mongomanager import carts_collection, canonical_product_id, parse_object_id


logger = logging.getLogger(__name__)


async def find_cart(cart_id: str):
    object_id = parse_object_id(cart_id)
    if object_id is None:
        return None
    try:
        return await carts_collection.find_one({"_id": object_id})
    except PyMongoError as e:
        logger.error("Error fetching cart %s: %s", cart_id, e)
        raise PersistenceError(str(e)) from e


async def insert_cart(cart: dict):
    try:
        result = await carts_collection.insert_one(cart)
    except PyMongoError as e:
        logger.error("Error creating cart: %s", e)
        raise PersistenceError(str(e)) from e
    cart["_id"] = result.inserted_id
    return cart


async def save_cart(cart: dict):
    # writes back the whole item list as it was built in memory
    try:
        await carts_collection.update_one(
            {"_id": cart["_id"]}, {"$set": {"products": cart["products"]}})
    except PyMongoError as e:
        logger.error("Error saving cart %s: %s", cart["_id"], e)
        raise PersistenceError(str(e)) from e
    return cart


def find_cart_item(cart: dict, product_id: str):
    product_id = canonical_product_id(product_id)
    for item in cart["products"]:
        if canonical_product_id(item["product_id"]) == product_id:
            return item
    return None


def serialize_cart(cart: dict):
    # convert id to string because of python
    return {
        "_id": str(cart["_id"]),
        "products": [dict(item) for item in cart["products"]],
    }
