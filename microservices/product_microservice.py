import logging
from typing import List
from pymongo.errors import PyMongoError
from exceptions import PersistenceError
from mongomanager import product_collection, parse_object_id


logger = logging.getLogger(__name__)


async def find_product(product_id: str):
    object_id = parse_object_id(product_id)
    if object_id is None:
        return None
    try:
        return await product_collection.find_one({"_id": object_id})
    except PyMongoError as e:
        logger.error("Error fetching product %s: %s", product_id, e)
        raise PersistenceError(str(e)) from e


async def save_product_stock(product: dict):
    # the stock is written back as an absolute value, concurrent writers can overwrite each other
    try:
        await product_collection.update_one(
            {"_id": product["_id"]}, {"$set": {"stock": product["stock"]}})
    except PyMongoError as e:
        logger.error("Error saving stock for product %s: %s",
                     product["_id"], e)
        raise PersistenceError(str(e)) from e
    logger.info("Product %s stock is now %s", product["_id"], product["stock"])
    return product


async def find_products(product_ids: List[str]):
    # returns a map of id string -> product for every id that still exists
    object_ids = [oid for oid in map(parse_object_id, product_ids) if oid is not None]
    if not object_ids:
        return {}
    try:
        products = await product_collection.find({"_id": {"$in": object_ids}}).to_list(None)
    except PyMongoError as e:
        logger.error("Error fetching products: %s", e)
        raise PersistenceError(str(e)) from e
    return {str(product["_id"]): serialize_product(product) for product in products}


def serialize_product(product: dict):
    product["_id"] = str(product["_id"])
    return product
