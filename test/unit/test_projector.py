from netconf_explorer.projector import project
from netconf_explorer.query import EMPTY, Query
from netconf_explorer.tree import EXPAND, ROOT

from conftest import make_tree


def names(view, element):
    return [child.name for child in view.children(element)]


class TestProject:
    def test_node_query_keeps_matching_sibling(self):
        root = make_tree(("root", [("a", "1"), ("b", "2")]))
        view = project(root, Query("a"), EMPTY)
        assert names(view, root) == ["a"]
        assert len(view) == 2

    def test_empty_queries_keep_everything(self, document):
        view = project(document, EMPTY, EMPTY)
        assert len(view) == document.count()
        assert not any(view.has_tag(element, EXPAND) for element in document.iter())
        assert view.has_tag(document, ROOT)

    def test_node_match_opens_whole_subtree(self, document):
        interfaces = document.find("interfaces")
        view = project(document, Query("interfaces"), EMPTY)
        assert all(element in view for element in interfaces.iter())
        assert document.find("system") not in view
        assert view.has_tag(document, EXPAND)
        # the match itself is visible but stays collapsed
        assert not view.has_tag(interfaces, EXPAND)

    def test_value_match_shows_matching_leaf_and_siblings(self, document):
        interfaces = document.find("interfaces")
        uplink, loopback = interfaces.children
        address = uplink.find("ipv4").find("address")

        view = project(document, EMPTY, Query("10.0.0"))

        assert names(view, document) == ["interfaces"]
        assert names(view, interfaces) == ["interface"]
        assert view.children(interfaces) == [uplink]
        assert names(view, uplink) == ["ipv4"]
        assert names(view, address) == ["ip", "prefix-length"]
        assert loopback not in view
        for element in (document, interfaces, uplink, uplink.find("ipv4"), address):
            assert view.has_tag(element, EXPAND)

    def test_value_match_is_case_insensitive(self, document):
        uplink = document.find("interfaces").children[0]
        view = project(document, EMPTY, Query("UPLINK"))
        assert names(view, uplink) == ["name", "description", "enabled", "ipv4"]
        assert all(element in view for element in uplink.iter())
        assert view.has_tag(uplink, EXPAND)

    def test_node_and_value_query_combined(self, document):
        interfaces = document.find("interfaces")
        loopback = interfaces.children[1]
        view = project(document, Query("interface"), Query("loopback"))
        assert view.children(interfaces) == [loopback]
        assert names(view, loopback) == ["name", "description", "enabled"]

    def test_synthetic_root_is_kept_without_matches(self, document):
        view = project(document, Query("no-such-node"), EMPTY)
        assert view.roots == [document]
        assert len(view) == 1
        assert view.has_tag(document, ROOT)

    def test_pruned_root_returns_none(self):
        root = make_tree(("x", [("y", "1")]))
        assert project(root, Query("zzz"), EMPTY, keep_root=False) is None

    def test_repeated_projection_does_not_leak(self, document):
        count = document.count()
        filtered = project(document, EMPTY, Query("10.0.0"))
        unfiltered = project(document, EMPTY, EMPTY)

        assert len(filtered) < count
        assert len(unfiltered) == count
        assert document.count() == count
        assert not any(unfiltered.has_tag(element, EXPAND) for element in document.iter())
