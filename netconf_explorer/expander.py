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
Automatic expansion of a projected tree, bounded by a shared budget.
"""

from netconf_explorer.tree import EXPAND

DEFAULT_EXPAND_LIMIT = 100


class Budget(object):
    """Expansion budget shared by every traversal of one display refresh."""

    def __init__(self, limit=DEFAULT_EXPAND_LIMIT):
        self.limit = max(int(limit), 0)
        self.remaining = self.limit
        self.exhausted = False

    def charge(self):
        if self.remaining > 0:
            self.remaining -= 1

    def available(self):
        """
        Returns True if another expansion may be issued; otherwise records
        that a candidate had to be skipped.
        """
        if self.remaining > 0:
            return True
        self.exhausted = True
        return False

    @property
    def used(self):
        return self.limit - self.remaining

    def __repr__(self):
        return "Budget({}/{})".format(self.remaining, self.limit)


def expand_matches(view, elements, budget):
    """
    Expands the elements tagged by the projector and their tagged
    descendants. A tagged element whose subtree consumed nothing costs one
    unit itself.

    :param view:     TreeView produced by project()
    :param elements: elements to start from, usually view.roots
    :param budget:   Budget
    :return: remaining budget
    """
    for element in elements:
        if not view.has_tag(element, EXPAND):
            continue
        if not budget.available():
            continue
        before = budget.remaining
        view.expand(element)
        expand_matches(view, view.children(element), budget)
        if budget.remaining == before:
            budget.charge()
    return budget.remaining


def expand_path(view, elements, path, budget):
    """
    Expands the elements along a schema path, e.g. the path segments of a
    selected schema node. Every element matching the current hop is
    expanded; it costs one unit if nothing further down consumed budget.
    Siblings not matching the hop are skipped free of charge.

    :param view:     TreeView produced by project()
    :param elements: sibling elements to match against path[0]
    :param path:     list of element names
    :param budget:   Budget
    :return: remaining budget
    """
    if not path:
        return budget.remaining

    hop, rest = path[0], path[1:]
    for element in elements:
        if element.name != hop:
            continue
        if not budget.available():
            break
        before = budget.remaining
        view.expand(element)
        expand_path(view, view.children(element), rest, budget)
        if budget.remaining == before:
            budget.charge()
    return budget.remaining
