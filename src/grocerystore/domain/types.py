"""Domain types for GroceryStore."""
from enum import Enum
from typing import Any, Annotated, Dict, List, Mapping, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ProductValidationError


class Category(str, Enum):
    """Product categories offered by the store."""
    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"


class Product(BaseModel):
    """One inventory line item.

    Attribute names are snake_case; the stored JSON uses the camelCase
    aliases. Numeric fields accept numeric strings such as ``"10"`` and are
    held as floats. They carry no range check so that any record the store
    once wrote still loads; form input goes through ``parse_product``.
    """
    product_id: Annotated[str, Field(alias="productId", min_length=1)]
    category: Category = Category.FRUITS
    product_name: Annotated[str, Field(alias="productName", min_length=1)]
    quantity: float
    mrp: float
    selling_price: Annotated[float, Field(alias="sellingPrice")]

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the stored camelCase record."""
        return self.model_dump(by_alias=True, mode="json")


# camelCase record key -> model attribute
REQUIRED_FIELDS: Dict[str, str] = {
    "productId": "product_id",
    "category": "category",
    "productName": "product_name",
    "quantity": "quantity",
    "mrp": "mrp",
    "sellingPrice": "selling_price",
}

NUMERIC_FIELDS: Dict[str, str] = {
    "quantity": "quantity",
    "mrp": "mrp",
    "sellingPrice": "selling_price",
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def missing_fields(data: Mapping[str, Any]) -> List[str]:
    """Return the record keys that are absent or blank in ``data``.

    Either the camelCase key or the attribute name counts as present.
    A numeric zero is a value, not a missing field.
    """
    missing = []
    for key, attr in REQUIRED_FIELDS.items():
        value = data.get(key, data.get(attr))
        if _is_blank(value):
            missing.append(key)
    return missing


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"]) or "record"
        parts.append(f"{field}: {detail['msg']}")
    return "; ".join(parts)


def negative_fields(product: Product) -> List[str]:
    """Return the record keys of numeric fields holding a negative value."""
    return [key for key, attr in NUMERIC_FIELDS.items() if getattr(product, attr) < 0]


def parse_product(data: Union[Product, Mapping[str, Any]]) -> Product:
    """Build a Product from form data, enforcing presence of every field.

    Form input must also hold non-negative numbers. Stored records are not
    range checked, see ``Product``.

    Raises:
        ProductValidationError: if a field is missing or fails validation.
    """
    if isinstance(data, Product):
        product = data
    else:
        missing = missing_fields(data)
        if missing:
            raise ProductValidationError(
                "Please fill all fields",
                suggestions=[f"Enter a value for {key}" for key in missing],
                metadata={"missing_fields": missing}
            )

        try:
            product = Product.model_validate(dict(data))
        except ValidationError as e:
            raise ProductValidationError(
                f"Invalid product: {_describe(e)}",
                suggestions=[
                    "Quantity, MRP and selling price must be numbers",
                    f"Category must be one of: {', '.join(c.value for c in Category)}"
                ],
                metadata={"missing_fields": [], "errors": e.errors(include_url=False, include_context=False)}
            ) from e

    negative = negative_fields(product)
    if negative:
        raise ProductValidationError(
            f"Invalid product: {', '.join(negative)} cannot be negative",
            suggestions=["Quantity, MRP and selling price must be non-negative numbers"],
            metadata={"missing_fields": [], "negative_fields": negative}
        )
    return product
