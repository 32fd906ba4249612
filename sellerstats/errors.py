class SalesAnalysisError(ValueError):
    """Base class for everything that aborts an analysis."""


class InvalidInputError(SalesAnalysisError):
    pass


class InvalidOptionsError(SalesAnalysisError):
    pass


class UnknownSellerError(SalesAnalysisError):
    def __init__(self, seller_id: str) -> None:
        super().__init__(f"Seller '{seller_id}' not found")
        self.seller_id = seller_id


class UnknownProductError(SalesAnalysisError):
    def __init__(self, sku: str) -> None:
        super().__init__(f"Product '{sku}' not found")
        self.sku = sku


class DuplicateKeyError(SalesAnalysisError):
    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Duplicate {kind} key '{key}'")
        self.kind = kind
        self.key = key
