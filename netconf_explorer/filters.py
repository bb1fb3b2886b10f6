# NETCONF filters

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
Combined subtree filters for the schema nodes selected by the user.
"""

from lxml import etree


def covering_selection(selections):
    """
    Drops every selected node that has a selected ancestor.

    :param selections: iterable of SchemaNodes; duplicates are ignored
    :return: list of the remaining nodes in selection order
    """
    selected = list(dict.fromkeys(selections))
    return [
        node
        for node in selected
        if not any(other.is_ancestor_of(node) for other in selected)
    ]


def build_filters(selections):
    """
    Builds the subtree-filter fragments retrieving all selected nodes with a
    single get call.

    Nodes that cannot be rendered themselves (modules, choices, cases) are
    replaced by the fragments of their renderable children.

    :param selections: iterable of SchemaNodes
    :return: list of <type 'lxml.etree._Element'>; empty means no filter at all
    """
    fragments = []
    for node in covering_selection(selections):
        template = node.create_netconf_template()
        if template is not None:
            fragments.append(template)
            continue
        for child in node.children:
            template = child.create_netconf_template()
            if template is not None:
                fragments.append(template)
    return fragments


def fragment_xml(fragment):
    return etree.tostring(fragment, encoding="unicode")


def filter_signature(fragments):
    """
    Canonical form of a filter set. Fragments are complete XML elements, so
    joining them without a separator stays unambiguous.
    """
    return "".join(fragment_xml(fragment) for fragment in fragments)


def wrap_filter(fragments):
    """
    :param fragments: list of subtree-filter fragments
    :return: "<filter type='subtree'>" document as accepted by ncclient, or None
    """
    if not fragments:
        return None
    return """<filter type="subtree">{}</filter>""".format(filter_signature(fragments))
