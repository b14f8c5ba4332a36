from fastapi import HTTPException


class NotFound(HTTPException):
    # cart, product or cart item is missing
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class InsufficientStock(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class PersistenceError(HTTPException):
    # wraps any failure coming from the mongo driver
    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


__all__ = ["NotFound", "InsufficientStock", "PersistenceError"]
