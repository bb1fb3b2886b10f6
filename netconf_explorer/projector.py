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
Projection of a data tree through the node and value search filters.
"""

from netconf_explorer.query import EMPTY
from netconf_explorer.tree import EXPAND, ROOT, TreeView


def project(root, node_query, value_query, keep_root=True, view=None):
    """
    Filters a tree by element names and leaf values.

    A name match opens the whole subtree below it: descendants are shown
    without having to match themselves. A value match on a leaf opens the
    leaf's parent the same way and tags that parent for expansion. Elements
    without a match on or below them are pruned.

    :param root:        DataElement (or any node with name/text/children)
    :param node_query:  Query for element names
    :param value_query: Query for leaf values
    :param keep_root:   keep root even without matches, True for the synthetic root
    :param view:        TreeView to add to, a new one by default
    :return: the TreeView, or None if root itself was pruned
    """
    if view is None:
        view = TreeView()
    survived = _project(view, root, None, node_query, value_query)
    if keep_root:
        if not survived:
            view.add(None, root)
        view.tag(root, ROOT)
    elif not survived:
        return None
    return view


def _project(view, element, parent, node_query, value_query):
    node_okay = node_query.matches(element.name)
    value_okay = not value_query
    filtered = bool(node_query) or bool(value_query)

    view.add(parent, element)

    # Once the name matched, everything below is visible
    if node_okay and node_query:
        node_query = EMPTY

    for child in element.children:
        if not child.children and value_query and value_query.matches(child.text):
            view.tag(element, EXPAND)
            value_query = EMPTY
            break

    survived = False
    for child in element.children:
        if _project(view, child, element, node_query, value_query):
            survived = True

    survived = survived or (node_okay and value_okay)

    if not survived:
        view.remove(element)
    elif parent is not None and filtered:
        view.tag(parent, EXPAND)
    return survived
