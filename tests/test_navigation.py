"""
End-to-end navigation tests: facade, in-memory host router and pathname observer.
"""
import pytest

from src.domain.errors import NotProvidedError
from src.domain.models import LocaleConfig, NavigationMethod
from src.i18n.locale import LocaleContext, provide
from src.infrastructure.history_router import MemoryHistoryRouter
from src.navigation import (
    LocaleCapabilities,
    UnlocalizedPathnameObserver,
    use_locale,
    use_localized_router,
    use_unlocalized_pathname,
)


@pytest.fixture
def config() -> LocaleConfig:
    return LocaleConfig(locales=("en", "fr"), default_locale="en", prefix_default=False)


class TestMemoryHistoryRouter:
    """Tests for the in-memory host router."""

    def test_initial_location(self):
        host = MemoryHistoryRouter("/fr/about?x=1")
        assert host.current_pathname() == "/fr/about"
        assert host.current_url() == "/fr/about?x=1"

    def test_push_and_back(self):
        host = MemoryHistoryRouter()
        host.push("/a")
        host.push("/b")
        host.back()
        assert host.current_pathname() == "/a"
        assert [e.url for e in host.entries] == ["/", "/a", "/b"]

    def test_push_drops_forward_entries(self):
        host = MemoryHistoryRouter()
        host.push("/a")
        host.push("/b")
        host.back()
        host.push("/c")
        assert [e.url for e in host.entries] == ["/", "/a", "/c"]

    def test_replace_overwrites_current_entry(self):
        host = MemoryHistoryRouter()
        host.push("/a", {"scroll": False})
        host.replace("/b")
        assert [e.url for e in host.entries] == ["/", "/b"]
        assert host.current.options == {}

    def test_back_on_first_entry_is_noop(self):
        host = MemoryHistoryRouter()
        events = []
        host.subscribe(events.append)
        host.back()
        assert host.current_pathname() == "/"
        assert events == []

    def test_prefetch_does_not_navigate(self):
        host = MemoryHistoryRouter()
        host.prefetch("/a")
        host.prefetch("/a")
        assert host.prefetched == ["/a"]
        assert host.current_pathname() == "/"

    def test_subscribe_and_unsubscribe(self):
        host = MemoryHistoryRouter()
        events = []
        unsubscribe = host.subscribe(events.append)
        host.push("/a?x=1")
        unsubscribe()
        host.push("/b")
        assert len(events) == 1
        assert events[0].method == NavigationMethod.PUSH
        assert events[0].pathname == "/a"
        assert events[0].url == "/a?x=1"


class TestUnlocalizedPathnameObserver:
    """Canonical pathname derived from the host location."""

    def test_scenario_push_then_observe(self, config):
        host = MemoryHistoryRouter()
        with provide(config, "fr"):
            use_localized_router(host).push("/profile")
            assert host.current_pathname() == "/fr/profile"
            assert use_unlocalized_pathname(host) == "/profile"

    def test_default_locale_path(self, config):
        host = MemoryHistoryRouter("/about")
        observer = UnlocalizedPathnameObserver(host, LocaleContext(config, "en"))
        assert observer.pathname == "/about"
        assert observer.locale == "en"

    def test_locale_root(self, config):
        host = MemoryHistoryRouter("/fr")
        observer = UnlocalizedPathnameObserver(host, LocaleContext(config, "fr"))
        assert observer.pathname == "/"
        assert observer.locale == "fr"

    def test_never_stale_after_navigation(self, config):
        host = MemoryHistoryRouter("/fr")
        context = LocaleContext(config, "fr")
        router = use_localized_router(host, context)
        observer = UnlocalizedPathnameObserver(host, context)

        router.push("/a")
        assert observer.pathname == "/a"
        router.replace("/b")
        assert observer.pathname == "/b"
        router.back()
        assert observer.pathname == "/"

    def test_query_is_not_part_of_pathname(self, config):
        host = MemoryHistoryRouter()
        with provide(config, "fr"):
            use_localized_router(host).push("/search?q=paris")
            assert use_unlocalized_pathname(host) == "/search"
        assert host.current_url() == "/fr/search?q=paris"

    def test_watch_reports_canonical_paths(self, config):
        host = MemoryHistoryRouter()
        context = LocaleContext(config, "fr")
        router = use_localized_router(host, context)
        observer = UnlocalizedPathnameObserver(host, context)
        seen = []

        stop = observer.watch(seen.append)
        router.push("/a")
        router.push("/b")
        router.back()
        stop()
        router.push("/c")

        assert seen == ["/a", "/b", "/a"]

    def test_requires_context(self):
        with pytest.raises(NotProvidedError):
            use_unlocalized_pathname(MemoryHistoryRouter())


class TestLocaleCapabilities:
    """Capability object assembled at the composition root."""

    def test_reads_through_explicit_context(self, config):
        host = MemoryHistoryRouter()
        capabilities = LocaleCapabilities(host, LocaleContext(config, "fr"))

        assert capabilities.read_locale() == "fr"
        capabilities.read_router().push("/profile")
        assert host.current_pathname() == "/fr/profile"
        assert capabilities.read_pathname() == "/profile"
        assert capabilities.observer.locale == "fr"

    def test_router_is_reused(self, config):
        capabilities = LocaleCapabilities(MemoryHistoryRouter(), LocaleContext(config, "fr"))
        assert capabilities.read_router() is capabilities.read_router()

    def test_follows_current_context_when_not_bound(self, config):
        capabilities = LocaleCapabilities(MemoryHistoryRouter())
        with provide(config, "fr"):
            assert capabilities.read_locale() == "fr"
        with provide(config, "en"):
            assert capabilities.read_locale() == "en"
            assert use_locale() == "en"

    def test_independent_instances(self, config):
        """Two render trees in one process keep separate locales."""
        first = LocaleCapabilities(MemoryHistoryRouter(), LocaleContext(config, "fr"))
        second = LocaleCapabilities(MemoryHistoryRouter(), LocaleContext(config, "en"))

        first.read_router().push("/x")
        second.read_router().push("/x")

        assert first.host.current_pathname() == "/fr/x"
        assert second.host.current_pathname() == "/x"
