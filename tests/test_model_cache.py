# ==============================================
# Tests for ModelCache (load-or-build)
# ==============================================

import pytest

from conftest import BlogContext, make_blog_descriptor
from modelstore.errors import ModelDeserializationError
from modelstore.metadata import compile_model
from modelstore.model_cache import ModelCache
from modelstore.persistence import DEFAULT_SCHEMA, FileModelStore


class CountingBuilder:
    """Builder that records how often it ran."""

    def __init__(self):
        self.calls = 0

    def __call__(self, consumer_type):
        self.calls += 1
        return make_blog_descriptor()


@pytest.fixture
def builder():
    return CountingBuilder()


class TestModelCache:

    def test_miss_builds_and_saves(self, file_store, builder):
        cache = ModelCache(file_store, builder)

        model = cache.get_model(BlogContext)

        assert builder.calls == 1
        assert file_store.exists(BlogContext)
        assert model == compile_model(make_blog_descriptor(), DEFAULT_SCHEMA)
        assert cache.get_stats()["misses"] == 1

    def test_hit_skips_builder(self, file_store, builder):
        cache = ModelCache(file_store, builder)
        first = cache.get_model(BlogContext)

        second = cache.get_model(BlogContext)

        assert builder.calls == 1
        assert second == first
        assert cache.get_stats()["hits"] == 1

    def test_restart_reuses_persisted_model(self, store_dir, builder):
        ModelCache(FileModelStore(str(store_dir)), builder).get_model(BlogContext)

        restarted = ModelCache(FileModelStore(str(store_dir)), builder)
        restarted.get_model(BlogContext)

        assert builder.calls == 1

    def test_corruption_raises_by_default(self, file_store, builder):
        file_store.get_file_path(BlogContext).write_bytes(b"garbage")
        cache = ModelCache(file_store, builder)

        with pytest.raises(ModelDeserializationError):
            cache.get_model(BlogContext)
        assert builder.calls == 0

    def test_corruption_rebuild_when_enabled(self, file_store, builder, capsys):
        file_store.get_file_path(BlogContext).write_bytes(b"garbage")
        cache = ModelCache(file_store, builder, rebuild_on_corruption=True)

        model = cache.get_model(BlogContext)

        assert builder.calls == 1
        assert model.entity_names == ("Blog", "Post")
        assert file_store.try_load(BlogContext) == model
        assert cache.get_stats()["rebuilds"] == 1
        assert "unreadable" in capsys.readouterr().out

    def test_builder_returning_none(self, memory_store):
        cache = ModelCache(memory_store, lambda consumer_type: None)
        with pytest.raises(ValueError):
            cache.get_model(BlogContext)

    def test_requires_store_and_builder(self, memory_store, builder):
        with pytest.raises(ValueError):
            ModelCache(None, builder)
        with pytest.raises(ValueError):
            ModelCache(memory_store, None)
