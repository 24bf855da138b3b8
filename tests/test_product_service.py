import asyncio
import uuid
import warnings

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import func, select, text
from sqlalchemy.exc import SADeprecationWarning

from app.models import ProductImage
from app.schemas.lookup import LookupKind, ProductLookup
from app.schemas.pagination import PaginationParams
from app.schemas.product import ProductCreate, ProductUpdate


def make_product(**overrides) -> ProductCreate:
    data = {
        "title": "Office Chair",
        "slug": "chair-1",
        "price": 120,
        "stock": 4,
        "sizes": ["M"],
        "gender": "unisex",
        "tags": ["furniture"],
        "images": ["chair-front.jpg", "chair-back.jpg"],
    }
    data.update(overrides)
    return ProductCreate(**data)


def test_create_returns_original_image_urls(product_service):
    async def workflow():
        created = await product_service.create(make_product())
        assert created.images == ["chair-front.jpg", "chair-back.jpg"]
        assert uuid.UUID(created.id)

        found = await product_service.find_one_plain(created.id)
        assert found.id == created.id
        assert sorted(found.images) == ["chair-back.jpg", "chair-front.jpg"]
        assert found.title == "Office Chair"
        assert found.stock == 4

    asyncio.run(workflow())


def test_create_derives_slug_from_title(product_service):
    async def workflow():
        created = await product_service.create(make_product(title="Men's Quilted Jacket", slug=None))
        assert created.slug == "mens-quilted-jacket"

    asyncio.run(workflow())


def test_find_one_unknown_uuid_raises_not_found(product_service):
    async def workflow():
        await product_service.create(make_product())
        with pytest.raises(HTTPException) as exc_info:
            await product_service.find_one(str(uuid.uuid4()))
        assert exc_info.value.status_code == 404

    asyncio.run(workflow())


def test_find_one_unknown_title_or_slug_raises_not_found(product_service):
    async def workflow():
        await product_service.create(make_product())
        with pytest.raises(HTTPException) as exc_info:
            await product_service.find_one("desk-1")
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Product with desk-1 not found"

    asyncio.run(workflow())


def test_find_one_title_ignores_case_slug_does_not(product_service):
    async def workflow():
        created = await product_service.create(make_product())

        by_title = await product_service.find_one("OFFICE CHAIR")
        by_slug = await product_service.find_one("chair-1")
        assert by_title.id == created.id
        assert by_slug.id == created.id
        assert sorted(image.url for image in by_slug.images) == ["chair-back.jpg", "chair-front.jpg"]

        with pytest.raises(HTTPException) as exc_info:
            await product_service.find_one("Chair-1")
        assert exc_info.value.status_code == 404

    asyncio.run(workflow())


def test_find_one_accepts_prepared_lookup(product_service):
    async def workflow():
        created = await product_service.create(make_product())
        lookup = ProductLookup(kind=LookupKind.IDENTIFIER, value=created.id)
        product = await product_service.find_one(lookup)
        assert product.slug == "chair-1"

    asyncio.run(workflow())


def test_update_with_images_replaces_all_previous(product_service, session_factory):
    async def workflow():
        created = await product_service.create(make_product())

        updated = await product_service.update(created.id, ProductUpdate(images=["a", "b"]))
        assert [image.url for image in updated.images] == ["a", "b"]

        reloaded = await product_service.find_one_plain(created.id)
        assert sorted(reloaded.images) == ["a", "b"]

        async with session_factory() as session:
            total = await session.scalar(select(func.count(ProductImage.id)))
        assert total == 2

    asyncio.run(workflow())


def test_update_without_images_keeps_them(product_service):
    async def workflow():
        created = await product_service.create(make_product())

        updated = await product_service.update(created.id, ProductUpdate(price=99.5))
        assert updated.price == 99.5
        assert updated.title == "Office Chair"
        assert sorted(image.url for image in updated.images) == ["chair-back.jpg", "chair-front.jpg"]

        reloaded = await product_service.find_one_plain(created.id)
        assert reloaded.price == 99.5
        assert reloaded.stock == 4
        assert sorted(reloaded.images) == ["chair-back.jpg", "chair-front.jpg"]

    asyncio.run(workflow())


def test_update_missing_product_raises_not_found(product_service):
    async def workflow():
        missing_id = str(uuid.uuid4())
        with pytest.raises(HTTPException) as exc_info:
            await product_service.update(missing_id, ProductUpdate(price=1))
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == f"Product with id: {missing_id} not found"

    asyncio.run(workflow())


def test_update_conflict_rolls_back_changes(product_service):
    async def workflow():
        first = await product_service.create(make_product())
        await product_service.create(make_product(title="Standing Desk", slug="desk-1", images=["desk.jpg"]))

        with pytest.raises(HTTPException) as exc_info:
            await product_service.update(first.id, ProductUpdate(slug="desk-1", images=["x.jpg"]))
        assert exc_info.value.status_code == 400

        reloaded = await product_service.find_one_plain(first.id)
        assert reloaded.slug == "chair-1"
        assert sorted(reloaded.images) == ["chair-back.jpg", "chair-front.jpg"]

    asyncio.run(workflow())


def test_remove_deletes_product_and_images(product_service, session_factory):
    async def workflow():
        created = await product_service.create(make_product())
        await product_service.remove(created.id)

        with pytest.raises(HTTPException) as exc_info:
            await product_service.find_one(created.id)
        assert exc_info.value.status_code == 404

        async with session_factory() as session:
            total = await session.scalar(select(func.count(ProductImage.id)))
        assert total == 0

    asyncio.run(workflow())


def test_remove_missing_product_raises_not_found(product_service):
    async def workflow():
        with pytest.raises(HTTPException) as exc_info:
            await product_service.remove(str(uuid.uuid4()))
        assert exc_info.value.status_code == 404

    asyncio.run(workflow())


def test_find_all_paginates_and_flattens_images(product_service):
    async def workflow():
        for i in range(12):
            await product_service.create(
                make_product(title=f"Chair {i}", slug=f"chair-{i}", images=[f"chair-{i}.jpg"])
            )

        first_page = await product_service.find_all()
        assert len(first_page) == 10
        assert all(len(p.images) == 1 and isinstance(p.images[0], str) for p in first_page)

        rest = await product_service.find_all(PaginationParams(limit=10, offset=10))
        assert len(rest) == 2

        slugs = {p.slug for p in first_page} | {p.slug for p in rest}
        assert len(slugs) == 12

    asyncio.run(workflow())


def test_delete_all_products_leaves_empty_page(product_service):
    async def workflow():
        await product_service.create(make_product())
        await product_service.create(make_product(title="Standing Desk", slug="desk-1"))

        await product_service.delete_all_products()

        assert await product_service.find_all() == []

    asyncio.run(workflow())


def test_concurrent_creates_do_not_interfere(product_service):
    async def workflow():
        products = [
            make_product(title=f"Lamp {i}", slug=f"lamp-{i}", images=[f"lamp-{i}.jpg"])
            for i in range(5)
        ]
        created = await asyncio.gather(*(product_service.create(p) for p in products))
        assert len({p.id for p in created}) == 5

        for i in range(5):
            found = await product_service.find_one_plain(f"lamp-{i}")
            assert found.images == [f"lamp-{i}.jpg"]

    asyncio.run(workflow())


def test_duplicate_slug_is_bad_request_not_internal(product_service):
    async def workflow():
        await product_service.create(make_product())
        with pytest.raises(HTTPException) as exc_info:
            await product_service.create(make_product(title="Another Chair"))
        assert exc_info.value.status_code == 400
        assert "UNIQUE" in exc_info.value.detail

    asyncio.run(workflow())


def test_unexpected_storage_error_is_opaque(product_service, engine, caplog):
    async def workflow():
        async with engine.begin() as conn:
            await conn.execute(text("DROP TABLE product_images"))

        with pytest.raises(HTTPException) as exc_info:
            await product_service.delete_all_products()
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Unexpected error, check server logs"

    with caplog.at_level("ERROR", logger="ProductService"):
        asyncio.run(workflow())
    assert "product_images" in caplog.text


def test_supplied_slug_keeps_underscores(product_service):
    async def workflow():
        created = await product_service.create(make_product(title="Men's Tee", slug="Men's Solar Tee_2"))
        assert created.slug == "mens_solar_tee_2"

        found = await product_service.find_one_plain("mens_solar_tee_2")
        assert found.id == created.id

        updated = await product_service.update(created.id, ProductUpdate(slug="Kids Tee"))
        assert updated.slug == "kids_tee"

    asyncio.run(workflow())


@pytest.mark.parametrize("field", ["title", "slug", "price", "stock"])
def test_update_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError):
        ProductUpdate(**{field: None})


def test_update_nullable_fields_accept_null(product_service):
    async def workflow():
        created = await product_service.create(make_product(description="Ergonomic"))
        updated = await product_service.update(created.id, ProductUpdate(description=None, gender=None))
        assert updated.description is None
        assert updated.gender is None

    asyncio.run(workflow())


def test_update_replacing_images_emits_no_deprecation_warnings(product_service):
    async def workflow():
        created = await product_service.create(make_product())
        with warnings.catch_warnings():
            warnings.simplefilter("error", SADeprecationWarning)
            await product_service.update(created.id, ProductUpdate(images=["c.jpg"]))
            await product_service.update(created.id, ProductUpdate(stock=1))

        reloaded = await product_service.find_one_plain(created.id)
        assert reloaded.images == ["c.jpg"]

    asyncio.run(workflow())
