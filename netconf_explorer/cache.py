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

import logging

from netconf_explorer.filters import filter_signature

log = logging.getLogger(__name__)


class QueryCache(object):
    """
    Remembers the last successful retrieval so that changing only the
    display filters does not query the device again.
    """

    def __init__(self):
        # (target, signature, document, fell_back), replaced as a unit
        self._entry = None

    @property
    def document(self):
        return self._entry[2] if self._entry else None

    @property
    def fell_back(self):
        return self._entry[3] if self._entry else False

    def should_refetch(self, fragments, target):
        """
        :param fragments: subtree-filter fragments of the new request
        :param target:    hashable retrieval target, e.g. (datastore, mode)
        :return: True unless the same filters were last fetched for the same target
        """
        if self._entry is None:
            return True
        cached_target, cached_signature = self._entry[0], self._entry[1]
        if target != cached_target:
            log.debug("Retrieval target changed from %s to %s", cached_target, target)
            return True
        return filter_signature(fragments) != cached_signature

    def remember(self, fragments, target, document=None, fell_back=False):
        """Stores a successful retrieval. Must not be called for failed fetches."""
        self._entry = (target, filter_signature(fragments), document, fell_back)

    def clear(self):
        self._entry = None
