"""
Tests for scoped global stylesheet registration and the map page's use of it.
"""

import pytest

from station_monitor.services.map_service import MAP_PAGE_CSS
from station_monitor.states.common.map_state import MAP_STYLE_NAME, mount_styles, unmount_styles
from station_monitor.utils.styles import StyleHandle, StyleRegistry, registry as page_registry


class Clock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def registry(clock):
    return StyleRegistry(max_age=60.0, clock=clock)


@pytest.fixture
def owner():
    """A client token, released from the process-wide registry afterwards."""
    token = "test-client-token"
    yield token
    page_registry.release(page_registry.handle_for(token, MAP_STYLE_NAME))


@pytest.mark.unit
class TestMapPageStyles:
    """Mount/unmount cycles of the map page, as its event handlers run them."""

    def test_mount_unmount_twice_restores_count(self, owner):
        start = len(page_registry)

        for _ in range(2):
            mount_styles(owner)
            assert len(page_registry) == start + 1
            assert page_registry.count(owner) == 1
            unmount_styles(owner)
            assert len(page_registry) == start
            assert page_registry.count(owner) == 0

    def test_scripts_target_the_registered_element(self, owner):
        element_id = page_registry.handle_for(owner, MAP_STYLE_NAME).element_id

        inject = mount_styles(owner)
        remove = unmount_styles(owner)

        assert f'"{element_id}"' in inject
        assert f'"{element_id}"' in remove
        assert "document.head.appendChild" in inject
        assert "el.remove()" in remove

    def test_double_mount_does_not_duplicate(self, owner):
        mount_styles(owner)
        mount_styles(owner)
        assert page_registry.count(owner) == 1

    def test_unmount_without_mount(self, owner):
        start = len(page_registry)
        assert "el.remove()" in unmount_styles(owner)
        assert len(page_registry) == start


@pytest.mark.unit
class TestStyleRegistry:

    def test_release_is_idempotent(self, registry):
        handle = registry.acquire("client-1", MAP_STYLE_NAME, MAP_PAGE_CSS)

        assert registry.release(handle) is True
        assert registry.release(handle) is False
        assert len(registry) == 0

    def test_owners_are_independent(self, registry):
        registry.acquire("client-1", MAP_STYLE_NAME, MAP_PAGE_CSS)
        registry.acquire("client-2", MAP_STYLE_NAME, MAP_PAGE_CSS)
        registry.release(registry.handle_for("client-1", MAP_STYLE_NAME))

        assert registry.count("client-1") == 0
        assert registry.count("client-2") == 1

    def test_scoped_releases_on_error(self, registry):
        with pytest.raises(KeyError):
            with registry.scoped("client-1", MAP_STYLE_NAME, MAP_PAGE_CSS) as handle:
                assert handle in registry
                raise KeyError("boom")
        assert handle not in registry
        assert len(registry) == 0

    def test_stale_entries_pruned_on_acquire(self, registry, clock):
        # client-1 closed its tab without unmounting
        registry.acquire("client-1", MAP_STYLE_NAME, MAP_PAGE_CSS)
        clock.now += 61.0
        registry.acquire("client-2", MAP_STYLE_NAME, MAP_PAGE_CSS)

        assert registry.count("client-1") == 0
        assert registry.count("client-2") == 1

    def test_recent_entries_survive_acquire(self, registry, clock):
        registry.acquire("client-1", MAP_STYLE_NAME, MAP_PAGE_CSS)
        clock.now += 30.0
        registry.acquire("client-2", MAP_STYLE_NAME, MAP_PAGE_CSS)

        assert len(registry) == 2


@pytest.mark.unit
class TestStyleHandle:

    def test_scripts_target_element_id(self):
        handle = StyleHandle(owner="client-1", element_id="sm-style-station-map")

        inject = handle.inject_script(".a { color: red; }")
        remove = handle.remove_script()

        assert '"sm-style-station-map"' in inject
        assert '".a { color: red; }"' in inject
        assert "document.head.appendChild" in inject
        assert '"sm-style-station-map"' in remove
        assert "el.remove()" in remove

    def test_css_is_quoted_safely(self):
        script = StyleHandle("o", "x").inject_script('content: "</style>";\n')
        assert '\\"</style>\\"' in script
        assert "\\n" in script
