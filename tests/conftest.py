"""Shared test fixtures and configuration."""

import pytest
from store_schema.config import load_default_fields
from store_schema.models import FieldSet


@pytest.fixture
def default_fields() -> FieldSet:
    """The packaged default FieldSet."""
    return load_default_fields()


@pytest.fixture
def sheet_text() -> str:
    """A row pasted from the store sheet, one column label per line."""
    return (
        "name\tCool&Simple Plateau  Magasin Cool&simple Plateau\n"
        "description\tYour frozen gourmet grocery on the Plateau. "
        "Votre épicerie de produits surgelés sur le Plateau.\n"
        "url\thttps://cool-simple.com/en/pages/store-plateau https://cool-simple.com/pages/store-plateau\n"
        "image\thttps://cool-simple.com/cdn/shop/files/plateau.png\n"
    )
