"""Tests for GroceryStore domain types."""
import pytest
from pydantic import ValidationError

from grocerystore.domain.errors import ProductValidationError
from grocerystore.domain.types import (
    Category,
    Product,
    missing_fields,
    parse_product,
)


def test_product_from_stored_record(apple_record):
    """Test building a product from camelCase keys with string numbers."""
    product = Product.model_validate(apple_record)
    assert product.product_id == "P1"
    assert product.category is Category.FRUITS
    assert product.product_name == "Apple"
    assert product.quantity == 10.0
    assert product.mrp == 50.0
    assert product.selling_price == 45.0


def test_product_default_category():
    """Test that category defaults to Fruits."""
    product = Product(product_id="P1", product_name="Apple", quantity=1, mrp=1, selling_price=1)
    assert product.category is Category.FRUITS


def test_product_to_record():
    """Test serialization uses camelCase keys and numbers."""
    product = Product(
        product_id="D1",
        category="Dairy",
        product_name="Milk",
        quantity=2,
        mrp=1.5,
        selling_price=1.25
    )
    assert product.to_record() == {
        "productId": "D1",
        "category": "Dairy",
        "productName": "Milk",
        "quantity": 2.0,
        "mrp": 1.5,
        "sellingPrice": 1.25,
    }


def test_product_is_immutable(apple_record):
    """Test that a product cannot be changed in place."""
    product = Product.model_validate(apple_record)
    with pytest.raises(ValidationError):
        product.product_id = "P2"


def test_product_strips_whitespace(make_record):
    """Test that text fields are trimmed."""
    product = Product.model_validate(make_record(productId=" P1 ", productName=" Apple "))
    assert product.product_id == "P1"
    assert product.product_name == "Apple"


@pytest.mark.parametrize("field, value", [
    ("mrp", "abc"),
    ("quantity", ""),
    ("category", "Meat"),
])
def test_product_rejects_invalid_values(make_record, field, value):
    """Test non-numeric numbers and unknown categories."""
    with pytest.raises(ValidationError):
        Product.model_validate(make_record(**{field: value}))


def test_product_allows_negative_numbers(make_record):
    """Test that stored records are not range checked."""
    product = Product.model_validate(make_record(quantity="-1", sellingPrice=-0.5))
    assert product.quantity == -1
    assert product.selling_price == -0.5


def test_missing_fields_none(apple_record):
    """Test a complete record."""
    assert missing_fields(apple_record) == []


def test_missing_fields_reports_in_field_order():
    """Test an empty record lists every field."""
    assert missing_fields({}) == [
        "productId", "category", "productName", "quantity", "mrp", "sellingPrice"
    ]


def test_missing_fields_accepts_attribute_names():
    """Test that snake_case keys count as present."""
    data = {
        "product_id": "P1",
        "category": "Fruits",
        "product_name": "Apple",
        "quantity": 0,
        "mrp": 0.0,
        "selling_price": "0",
    }
    assert missing_fields(data) == []


def test_parse_product_passes_product_through(apple_record):
    """Test that a Product is returned as is."""
    product = Product.model_validate(apple_record)
    assert parse_product(product) is product


def test_parse_product_missing(make_record):
    """Test the error raised for missing fields."""
    with pytest.raises(ProductValidationError) as exc_info:
        parse_product(make_record(productId="", quantity=None))
    error = exc_info.value
    assert error.message == "Please fill all fields"
    assert error.metadata["missing_fields"] == ["productId", "quantity"]
    assert len(error.suggestions) == 2


def test_parse_product_invalid(make_record):
    """Test the error raised for values that do not parse."""
    with pytest.raises(ProductValidationError) as exc_info:
        parse_product(make_record(mrp="abc"))
    error = exc_info.value
    assert error.message.startswith("Invalid product:")
    assert "mrp" in error.message
    assert error.metadata["missing_fields"] == []
    assert isinstance(error.__cause__, ValidationError)


@pytest.mark.parametrize("field", ["quantity", "mrp", "sellingPrice"])
def test_parse_product_negative(make_record, field):
    """Test that form input must hold non-negative numbers."""
    with pytest.raises(ProductValidationError) as exc_info:
        parse_product(make_record(**{field: "-5"}))
    error = exc_info.value
    assert error.message == f"Invalid product: {field} cannot be negative"
    assert error.metadata["negative_fields"] == [field]
