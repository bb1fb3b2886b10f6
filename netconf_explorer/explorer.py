# -*- coding: utf-8 -*-
# © 2022 Nokia
# Licensed under the Apache License 2.0 License
# SPDX-License-Identifier: Apache-2.0

#
# The contents of this file are licensed under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with the
# License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""
Schema-scoped data explorer for NETCONF devices.
"""
# import standard library
import logging
from collections import namedtuple

# import NAPALM libraries
from napalm.base.helpers import convert

# import local modules
from netconf_explorer.cache import QueryCache
from netconf_explorer.exceptions import RefusedError, TransportError
from netconf_explorer.expander import DEFAULT_EXPAND_LIMIT, Budget, expand_matches, expand_path
from netconf_explorer.filters import build_filters
from netconf_explorer.projector import project
from netconf_explorer.query import Query
from netconf_explorer.schema import filter_modules, find_schema_node
from netconf_explorer.session import MODE_CONFIG, MODE_STATE
from netconf_explorer.tree import TreeView

DataView = namedtuple("DataView", ["view", "truncated", "fell_back"])


class Explorer(object):
    """Data retrieval and tree projection for one device session."""

    def __init__(self, session, modules=None, optional_args=None):
        """
        :param session:       object with fetch(datastore, fragments, mode), e.g. NetconfSession
        :param modules:       top-level SchemaNodes of the device
        :param optional_args: dict with "expand_limit" (int) and "config_only" (bool)
        """
        self.session = session
        self.modules = list(modules or [])
        self.cache = QueryCache()
        self.view = None

        if optional_args is None:
            optional_args = {}
        self.expand_limit = convert(int, optional_args.get("expand_limit"), DEFAULT_EXPAND_LIMIT)
        self.config_only = bool(optional_args.get("config_only", False))

    @property
    def mode(self):
        return MODE_CONFIG if self.config_only else MODE_STATE

    def build_filters(self, selections):
        return build_filters(selections)

    def retrieve_or_reuse(self, fragments, datastore=None):
        """
        Returns the data for the given filters, querying the device only if
        the filters or the retrieval target changed since the last success.

        :param fragments: subtree-filter fragments from build_filters()
        :param datastore: None for operational data, or "running", "candidate", "startup"
        :return: tuple (synthetic root DataElement, fell_back)
        Raises: TransportError, or RefusedError if even the configuration was refused
        """
        target = (datastore, self.mode)
        if not self.cache.should_refetch(fragments, target):
            logging.debug("Reusing cached data for %s", target)
            return self.cache.document, self.cache.fell_back

        fell_back = False
        try:
            document = self._fetch(datastore, fragments, self.mode)
        except RefusedError as e:
            if datastore is not None or self.mode != MODE_STATE:
                raise
            logging.warning(
                "The device refused to send operational data (%s), "
                "displaying configuration only", e.tag or e
            )
            document = self._fetch("running", fragments, MODE_CONFIG)
            fell_back = True

        self.cache.remember(fragments, target, document, fell_back)
        return document, fell_back

    def _fetch(self, datastore, fragments, mode):
        try:
            return self.session.fetch(datastore, fragments, mode)
        except TransportError as e:
            logging.error("Failed to get data: %s", e)
            raise

    def project_and_expand(self, root, node_filter="", value_filter="", budget=None, selections=()):
        """
        Filters a retrieved document and expands it for display.

        Without text filters the data of the selected schema nodes is
        expanded along their paths; with filters the matches are expanded.

        :param root:         synthetic root DataElement
        :param node_filter:  search text for element names
        :param value_filter: search text for leaf values
        :param budget:       Budget, a new one with expand_limit by default
        :param selections:   selected SchemaNodes
        :return: tuple (TreeView, truncated)
        """
        node_query = Query(node_filter)
        value_query = Query(value_filter)
        if budget is None:
            budget = Budget(self.expand_limit)

        view = project(root, node_query, value_query)
        view.expand(root)
        top = view.children(root)

        if not node_query and not value_query:
            for node in selections:
                expand_path(view, top, node.path_segments(), budget)
        expand_matches(view, top, budget)

        if budget.exhausted:
            logging.warning(
                "Too many results! They are all shown, but only %d have been auto-expanded.",
                budget.limit,
            )
        return view, budget.exhausted

    def show_data(self, selections=(), node_filter="", value_filter="", datastore=None):
        """
        Runs the whole pipeline for one user action. On failure the previous
        view and the cache are left untouched.

        :return: DataView(view, truncated, fell_back)
        """
        selections = list(dict.fromkeys(selections))
        fragments = self.build_filters(selections)
        document, fell_back = self.retrieve_or_reuse(fragments, datastore)
        view, truncated = self.project_and_expand(
            document, node_filter, value_filter, selections=selections
        )
        self.view = view
        return DataView(view, truncated, fell_back)

    def show_schema(self, module_filter="", node_filter=""):
        """
        Builds the schema tree for the modules matching module_filter (name
        or description) and the nodes matching node_filter.

        :return: tuple (TreeView, truncated)
        """
        node_query = Query(node_filter)
        view = TreeView()
        for module in filter_modules(self.modules, Query(module_filter)):
            project(module, node_query, Query(), keep_root=False, view=view)

        budget = Budget(self.expand_limit)
        expand_matches(view, view.roots, budget)
        if budget.exhausted:
            logging.warning(
                "Too many search results! They are all shown, but only %d have been auto-expanded.",
                budget.limit,
            )
        return view, budget.exhausted

    def schema_node_for(self, element):
        """Returns the SchemaNode describing a displayed data element, or None."""
        return find_schema_node(self.modules, element)
