# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - blog_descriptor      → Two entities, one relationship, no explicit schema
# - shop_descriptor      → One entity with an explicit model schema
# - store_dir            → Empty directory under tmp_path
# - file_store           → FileModelStore rooted at store_dir
# - memory_store         → InMemoryModelStore
#
# CONSUMER TYPES:
# ---------------
# BlogContext / ShopContext are plain classes used as cache keys.
# ==============================================

import pytest

from modelstore.metadata import EntityType, ModelDescriptor, Relationship
from modelstore.persistence import FileModelStore, InMemoryModelStore


class BlogContext:
    """Consumer type owning the blog model."""


class ShopContext:
    """Consumer type owning the shop model."""


def make_blog_descriptor() -> ModelDescriptor:
    descriptor = ModelDescriptor(namespace="MyApp")

    blog = EntityType(name="Blog", table="Blogs")
    blog.add_property("Id", "Int32", nullable=False, is_key=True)
    blog.add_property("Title", "String", max_length=200)
    descriptor.add_entity(blog)

    post = EntityType(name="Post")
    post.add_property("Id", "Int32", nullable=False, is_key=True)
    post.add_property("BlogId", "Int32", nullable=False)
    post.add_property("Body", "String")
    descriptor.add_entity(post)

    descriptor.add_relationship(Relationship(
        name="Blog_Posts",
        principal="Blog",
        dependent="Post",
        foreign_key=["BlogId"],
    ))
    return descriptor


def make_shop_descriptor() -> ModelDescriptor:
    descriptor = ModelDescriptor(namespace="Shop", default_schema="sales")
    order = EntityType(name="Order", schema="orders")
    order.add_property("OrderId", "Guid", nullable=False, is_key=True)
    order.add_property("Total", "Decimal")
    descriptor.add_entity(order)

    customer = EntityType(name="Customer")
    customer.add_property("Id", "Int32", nullable=False, is_key=True)
    descriptor.add_entity(customer)
    return descriptor


@pytest.fixture
def blog_descriptor() -> ModelDescriptor:
    return make_blog_descriptor()


@pytest.fixture
def shop_descriptor() -> ModelDescriptor:
    return make_shop_descriptor()


@pytest.fixture
def store_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def file_store(store_dir) -> FileModelStore:
    return FileModelStore(str(store_dir))


@pytest.fixture
def memory_store() -> InMemoryModelStore:
    return InMemoryModelStore()
