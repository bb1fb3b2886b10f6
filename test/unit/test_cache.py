from netconf_explorer.cache import QueryCache
from netconf_explorer.filters import build_filters

OPERATIONAL = (None, "state")
RUNNING = ("running", "state")


class TestQueryCache:
    def test_empty_cache_always_fetches(self, schema):
        cache = QueryCache()
        assert cache.should_refetch(build_filters([schema.interface]), OPERATIONAL)
        assert cache.should_refetch([], OPERATIONAL)
        assert cache.document is None
        assert cache.fell_back is False

    def test_same_filters_and_target_are_reused(self, schema, document):
        cache = QueryCache()
        cache.remember(build_filters([schema.interface]), OPERATIONAL, document)

        # Fragments are rebuilt for every action, only their serialization counts
        assert not cache.should_refetch(build_filters([schema.interface]), OPERATIONAL)
        assert not cache.should_refetch(build_filters([schema.interface]), OPERATIONAL)
        assert cache.document is document

    def test_changed_target_refetches(self, schema, document):
        cache = QueryCache()
        cache.remember(build_filters([schema.interface]), OPERATIONAL, document)
        assert cache.should_refetch(build_filters([schema.interface]), RUNNING)
        assert cache.should_refetch(build_filters([schema.interface]), (None, "config-only"))

    def test_changed_filters_refetch(self, schema, document):
        cache = QueryCache()
        cache.remember(build_filters([schema.interface]), OPERATIONAL, document)
        assert cache.should_refetch(build_filters([schema.hostname]), OPERATIONAL)
        assert cache.should_refetch([], OPERATIONAL)

    def test_unfiltered_fetch_is_cached(self, document):
        cache = QueryCache()
        cache.remember([], OPERATIONAL, document)
        assert not cache.should_refetch([], OPERATIONAL)

    def test_remember_replaces_everything(self, schema, document):
        cache = QueryCache()
        cache.remember([], OPERATIONAL, document, fell_back=True)
        other = object()
        cache.remember(build_filters([schema.hostname]), RUNNING, other)
        assert cache.document is other
        assert cache.fell_back is False
        assert cache.should_refetch([], OPERATIONAL)

    def test_clear(self, document):
        cache = QueryCache()
        cache.remember([], OPERATIONAL, document)
        cache.clear()
        assert cache.should_refetch([], OPERATIONAL)
