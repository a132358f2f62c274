"""Catalog data model.

Pydantic model for one catalog item as returned by the product store.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProductRecord(BaseModel):
    """Product entity in the catalog.

    Records are immutable snapshots of the store's view of a product; a
    changed product always arrives as a new record on the next fetch.

    Attributes:
        id: Opaque unique identifier (``_id`` on the wire).
        sku: Optional part code.
        name: Display name.
        description: Free text description.
        category: Optional primary category.
        sub_category: Optional sub category (``subCategory`` on the wire).
        categories: Ordered tags used for faceting.
        price: Optional unit price, currency-agnostic.
        stock: Optional stock quantity.
        images: Ordered image locators; the first one is the thumbnail.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    sku: str | None = None
    name: str
    description: str
    category: str | None = None
    sub_category: str | None = Field(
        default=None,
        validation_alias=AliasChoices("subCategory", "sub_category"),
    )
    categories: tuple[str, ...] | None = None
    price: int | float | None = None
    stock: int | float | None = None
    images: tuple[str, ...] | None = None

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductRecord(id={self.id}, sku={self.sku}, name={self.name[:30]})>"

    def thumbnail(self, placeholder: str) -> str:
        """Get the representative image.

        An empty ``images`` sequence and a missing one are treated alike.

        Args:
            placeholder: Fallback asset used when there is no image.

        Returns:
            First image locator or the placeholder.
        """
        if self.images:
            return self.images[0]
        return placeholder
