import os
import motor.motor_asyncio
from bson import ObjectId
from bson.errors import InvalidId


client = motor.motor_asyncio.AsyncIOMotorClient(os.getenv("MONGO_DB_URL"))
db = client.get_database(os.getenv("MONGO_DB_NAME", "CartStore"))

carts_collection = db.get_collection("Carts")
product_collection = db.get_collection("Products")


def parse_object_id(id):
    # ids coming from the url that are not valid ObjectIds can't match any document
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        return None


def canonical_product_id(id):
    # the same ObjectId can arrive as upper or lower case hex
    object_id = parse_object_id(str(id))
    return str(object_id) if object_id is not None else str(id)
