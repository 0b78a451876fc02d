"""Inventory store: the product list mirrored to key-value storage."""
import json
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from grocerystore.config.settings import get_settings
from grocerystore.domain.errors import ProductValidationError, StorageError
from grocerystore.domain.types import Product, parse_product
from grocerystore.storage.base import KeyValueStorage
from .base_service import BaseService, Result

ProductInput = Union[Product, Mapping[str, Any]]
ChangeListener = Callable[[List[Product]], None]
DeleteConfirmation = Callable[[str], bool]


class InventoryStore(BaseService):
    """Ordered product records, persisted in full after every change.

    Mutations build the new sequence, persist it, and only then swap it in,
    so a failed write leaves the store as it was.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: Optional[str] = None,
        allow_duplicate_ids: Optional[bool] = None
    ):
        """
        Initialize the store. Call load() to read persisted records.

        Args:
            storage: Key-value storage backend
            key: Storage key (default: settings.STORAGE_KEY)
            allow_duplicate_ids: Accept an add whose productId already
                exists (default: settings.ALLOW_DUPLICATE_IDS)
        """
        super().__init__()
        settings = get_settings()
        self.storage = storage
        self.key = key or settings.STORAGE_KEY
        self.allow_duplicate_ids = (
            settings.ALLOW_DUPLICATE_IDS if allow_duplicate_ids is None
            else allow_duplicate_ids
        )
        self._items: List[Product] = []
        self._listeners: List[ChangeListener] = []

    @property
    def items(self) -> List[Product]:
        """Copy of the current records in insertion order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, product_id: str) -> Optional[Product]:
        """Return the record with ``product_id``, if any."""
        product_id = product_id.strip()
        return next((p for p in self._items if p.product_id == product_id), None)

    def subscribe(self, listener: ChangeListener) -> None:
        """Call ``listener`` with the new records after every persisted change."""
        self._listeners.append(listener)

    def load(self) -> List[Product]:
        """
        Replace the in-memory records with the persisted ones.

        Missing, unreadable or unparsable data loads as an empty inventory.
        Records that fail validation are skipped one by one.

        Returns:
            The loaded records
        """
        self._items = self._read()
        self.logger.debug("Inventory loaded", key=self.key, count=len(self._items))
        return self.items

    def _read(self) -> List[Product]:
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as e:
            self.logger.warning("Cannot read inventory, starting empty", error=e.message)
            return []
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError:
            self.logger.warning("Stored inventory is not valid JSON, starting empty", key=self.key)
            return []
        if not isinstance(records, list):
            self.logger.warning("Stored inventory is not a list, starting empty", key=self.key)
            return []

        # One bad record must not cost the others
        products = []
        for index, record in enumerate(records):
            try:
                products.append(Product.model_validate(record))
            except ValidationError as e:
                self.logger.warning(
                    "Skipping invalid stored record",
                    key=self.key,
                    index=index,
                    error_count=e.error_count()
                )
        return products

    def persist(self, products: Optional[Sequence[Product]] = None) -> None:
        """
        Write the full record list under the storage key.

        Args:
            products: Records to write (default: the current records)

        Raises:
            StorageError: if the backend write fails
        """
        products = self._items if products is None else products
        payload = json.dumps([p.to_record() for p in products], ensure_ascii=False)
        self.storage.set_item(self.key, payload)
        self.logger.debug("Inventory persisted", key=self.key, count=len(products))

    def _commit(self, products: List[Product]) -> None:
        self.persist(products)
        self._items = products
        for listener in self._listeners:
            try:
                listener(self.items)
            except Exception:
                # The change is already persisted
                self.logger.exception("Inventory listener failed")

    def add(self, record: ProductInput) -> Result[Product]:
        """
        Append a product to the end of the inventory.

        Args:
            record: Product or form data with all six fields

        Returns:
            Result containing the added product or error
        """
        try:
            product = parse_product(record)
        except ProductValidationError as e:
            self._log_action("add_product", status="rejected", error=e.message)
            return Result.from_error(e)

        if not self.allow_duplicate_ids and self.get(product.product_id):
            self._log_action("add_product", status="rejected", product_id=product.product_id)
            return Result.fail(
                f"Product ID '{product.product_id}' already exists",
                suggestions=["Use a different product ID", "Edit the existing product instead"],
                missing_fields=[]
            )

        try:
            self._commit(self._items + [product])
        except StorageError as e:
            self.logger.exception("Failed to add product")
            return Result.from_error(e)

        self._log_action("add_product", product_id=product.product_id, count=len(self._items))
        return Result.ok(product)

    def update(self, record: ProductInput) -> Result[Product]:
        """
        Replace the product with the same productId, keeping its position.

        An unknown productId leaves the inventory unchanged; the result is
        still successful with ``metadata["matched"]`` set to False.

        Args:
            record: Product or form data with all six fields

        Returns:
            Result containing the submitted product or error
        """
        try:
            product = parse_product(record)
        except ProductValidationError as e:
            self._log_action("update_product", status="rejected", error=e.message)
            return Result.from_error(e)

        matched = False
        updated = []
        for item in self._items:
            if item.product_id == product.product_id:
                updated.append(product)
                matched = True
            else:
                updated.append(item)

        try:
            self._commit(updated)
        except StorageError as e:
            self.logger.exception("Failed to update product")
            return Result.from_error(e)

        self._log_action(
            "update_product",
            status="success" if matched else "not_found",
            product_id=product.product_id
        )
        return Result.ok(product, matched=matched)

    def delete(
        self,
        product_id: str,
        confirm: Optional[DeleteConfirmation] = None
    ) -> Result[Optional[Product]]:
        """
        Remove the product with ``product_id``.

        Args:
            product_id: ID of the product to remove
            confirm: Asked with the product ID before anything changes;
                returning False cancels the delete

        Returns:
            Result containing the removed product (None if not found)
        """
        product_id = product_id.strip()
        if confirm is not None and not confirm(product_id):
            self._log_action("delete_product", status="cancelled", product_id=product_id)
            return Result.ok(None, removed=False, cancelled=True)

        removed = self.get(product_id)
        remaining = [p for p in self._items if p.product_id != product_id]

        try:
            self._commit(remaining)
        except StorageError as e:
            self.logger.exception("Failed to delete product")
            return Result.from_error(e)

        self._log_action(
            "delete_product",
            status="success" if removed else "not_found",
            product_id=product_id
        )
        return Result.ok(removed, removed=removed is not None, cancelled=False)
