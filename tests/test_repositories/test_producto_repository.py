"""
Tests for ProductoRepository composition.

Tests cover:
- Create populates price and inventory for the assigned id
- Fixed call order (store, pricing, inventory)
- Details are recomputed on every read
- NotFound from the store propagates unchanged
- Failures of any data source abort the operation
"""

import pytest
from typing import List

from repositories.producto_repository import ProductoRepository
from models.productos import Producto, ProductoCreate, EstadoInventario
from core.exceptions import NotFoundException, ServiceUnavailableException


@pytest.fixture
def producto_repository(
    fake_producto_datasource,
    fake_precio_datasource,
    fake_inventario_datasource,
) -> ProductoRepository:
    """Create a ProductoRepository over fake data sources."""
    return ProductoRepository(
        fake_producto_datasource,
        fake_precio_datasource,
        fake_inventario_datasource,
    )


@pytest.fixture
def producto_create(producto_data) -> ProductoCreate:
    return ProductoCreate(**producto_data)


class TestProductoRepositoryCreate:
    """Tests for creating productos through the repository."""

    def test_create_populates_price_and_inventory(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_precio_datasource,
        fake_inventario_datasource,
    ):
        """Test created producto carries pricing and inventory output for its id."""
        fake_precio_datasource.default_price = 123.45
        fake_inventario_datasource.default_cantidad = 7

        producto = producto_repository.create(producto_create)

        assert isinstance(producto, Producto)
        assert producto.precio == 123.45
        assert producto.inventario.cantidad == 7
        assert producto.inventario.estado == EstadoInventario.disponible
        assert producto.nombre == producto_create.nombre
        assert producto.precio_base == producto_create.precio_base

    def test_create_uses_assigned_id_for_enrichment(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_producto_datasource,
        fake_precio_datasource,
    ):
        """Test pricing is looked up with the id assigned by the store."""
        seen_ids: List[str] = []
        original = fake_precio_datasource.price_for

        def recording_price_for(producto_id: str) -> float:
            seen_ids.append(producto_id)
            return original(producto_id)

        fake_precio_datasource.price_for = recording_price_for

        producto = producto_repository.create(producto_create)

        assert seen_ids == [str(producto.id_producto)]
        assert str(producto.id_producto) in fake_producto_datasource.productos

    def test_create_call_order(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        calls: List[str],
    ):
        """Test store is called first, then pricing, then inventory."""
        producto_repository.create(producto_create)

        assert calls == ["store.create", "pricing.price_for", "inventory.status_for"]

    def test_create_inventory_failure_returns_nothing(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_inventario_datasource,
    ):
        """Test inventory failure surfaces to the caller."""
        fake_inventario_datasource.fail = True

        with pytest.raises(ServiceUnavailableException):
            producto_repository.create(producto_create)

    def test_create_pricing_failure_skips_inventory(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_precio_datasource,
        calls: List[str],
    ):
        """Test pricing failure aborts before inventory is consulted."""
        fake_precio_datasource.fail = True

        with pytest.raises(ServiceUnavailableException):
            producto_repository.create(producto_create)

        assert "inventory.status_for" not in calls


class TestProductoRepositoryGetDetails:
    """Tests for reading productos through the repository."""

    def test_get_details_returns_same_id(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
    ):
        """Test details of a created producto keep its id."""
        created = producto_repository.create(producto_create)

        producto = producto_repository.get_details(str(created.id_producto))

        assert producto.id_producto == created.id_producto
        assert producto.nombre == created.nombre

    def test_get_details_recomputes_values(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_precio_datasource,
        fake_inventario_datasource,
    ):
        """Test price and inventory reflect current values, not creation-time ones."""
        created = producto_repository.create(producto_create)
        producto_id = str(created.id_producto)

        fake_precio_datasource.prices[producto_id] = 50.0
        fake_inventario_datasource.cantidades[producto_id] = 0

        producto = producto_repository.get_details(producto_id)

        assert created.precio != 50.0
        assert producto.precio == 50.0
        assert producto.inventario.cantidad == 0
        assert producto.inventario.estado == EstadoInventario.agotado

    def test_get_details_call_order(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        calls: List[str],
    ):
        """Test details read store, then pricing, then inventory."""
        created = producto_repository.create(producto_create)
        calls.clear()

        producto_repository.get_details(str(created.id_producto))

        assert calls == ["store.find_by_id", "pricing.price_for", "inventory.status_for"]

    def test_get_details_not_found_propagates(
        self,
        producto_repository: ProductoRepository,
        calls: List[str],
    ):
        """Test NotFound from the store reaches the caller unchanged."""
        fake_id = "00000000-0000-0000-0000-000000000000"

        with pytest.raises(NotFoundException) as exc_info:
            producto_repository.get_details(fake_id)

        assert fake_id in exc_info.value.message
        assert exc_info.value.status_code == 404
        assert calls == ["store.find_by_id"]

    def test_get_details_inventory_failure(
        self,
        producto_repository: ProductoRepository,
        producto_create: ProductoCreate,
        fake_inventario_datasource,
    ):
        """Test inventory failure on read returns no record."""
        created = producto_repository.create(producto_create)
        fake_inventario_datasource.fail = True

        with pytest.raises(ServiceUnavailableException):
            producto_repository.get_details(str(created.id_producto))


class TestProductoRepositoryList:
    """Tests for listing productos through the repository."""

    def test_list_details_enriches_every_item(
        self,
        producto_repository: ProductoRepository,
        producto_data,
        producto_ropa_data,
        fake_precio_datasource,
    ):
        """Test every listed producto has price and inventory."""
        producto_repository.create(ProductoCreate(**producto_data))
        producto_repository.create(ProductoCreate(**producto_ropa_data))
        fake_precio_datasource.default_price = 10.0

        productos = producto_repository.list_details()

        assert len(productos) == 2
        assert producto_repository.count() == 2
        assert all(p.precio == 10.0 for p in productos)
        assert all(p.inventario is not None for p in productos)

    def test_list_details_pagination(
        self,
        producto_repository: ProductoRepository,
        producto_data,
    ):
        """Test skip/limit are forwarded to the store."""
        for i in range(5):
            data = dict(producto_data, nombre=f"Producto {i}")
            producto_repository.create(ProductoCreate(**data))

        page1 = producto_repository.list_details(skip=0, limit=3)
        page2 = producto_repository.list_details(skip=3, limit=3)

        assert len(page1) == 3
        assert len(page2) == 2
        assert {p.id_producto for p in page1}.isdisjoint({p.id_producto for p in page2})
